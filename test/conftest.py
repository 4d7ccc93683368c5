import pytest

from musicstream_server.app import create_app
from musicstream_server.app.dto import SongDTO
from musicstream_server.app.services.song_repository import SongRepository
from musicstream_server.app.services.song_service import SongService
from musicstream_server.config import TestConfig
from musicstream_server.extensions import db


@pytest.fixture
def app():
    # Jede App bekommt ihre eigene In-Memory-Datenbank
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repository(app):
    return SongRepository()


@pytest.fixture
def service(repository):
    return SongService(song_repository=repository)


@pytest.fixture
def imagine():
    return SongDTO(
        title="Imagine",
        artist="John Lennon",
        album="Imagine",
        genre="Rock",
        category="pop",
        duration=183,
        audio_url="https://example.com/imagine.mp3",
        image_url="https://example.com/imagine.jpg",
    )


@pytest.fixture
def bohemian():
    return SongDTO(title="Bohemian Rhapsody", artist="Queen", category="Rock", duration=354)
