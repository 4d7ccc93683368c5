from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from musicstream_server.app.dto import SongDTO
from musicstream_server.app.services.song_repository import SongRepository
from musicstream_server.app.services.song_service import SongService


# ========== CREATE ==========


def test_create_song_assigns_id_and_equal_timestamps(service, imagine):
    created = service.create_song(imagine)

    assert created.id is not None
    assert created.title == "Imagine"
    assert created.category == "pop"
    assert created.duration == 183
    assert created.created_at is not None
    assert created.created_at == created.updated_at


def test_create_then_get_returns_same_song(service, imagine):
    created = service.create_song(imagine)

    assert service.get_song_by_id(created.id) == created


def test_create_ignores_client_id(service, imagine, bohemian):
    first = service.create_song(imagine)

    bohemian.id = first.id
    second = service.create_song(bohemian)

    assert second.id != first.id
    # Der erste Song wurde nicht überschrieben
    assert service.get_song_by_id(first.id).title == "Imagine"


def test_create_ignores_client_timestamps(service, imagine):
    imagine.created_at = datetime(2000, 1, 1)
    imagine.updated_at = datetime(2000, 1, 1)

    created = service.create_song(imagine)

    assert created.created_at > datetime(2000, 1, 1)


def test_create_without_artist_propagates_storage_error(service):
    with pytest.raises(IntegrityError):
        service.create_song(SongDTO(title="Imagine"))

    assert service.get_all_songs() == []


# ========== READ ==========


def test_get_all_songs_empty(service):
    assert service.get_all_songs() == []


def test_get_all_songs_keeps_store_order(service, imagine, bohemian):
    first = service.create_song(imagine)
    second = service.create_song(bohemian)

    assert [song.id for song in service.get_all_songs()] == [first.id, second.id]


def test_get_song_by_id_not_found(service):
    assert service.get_song_by_id(999) is None


# ========== UPDATE ==========


def test_update_replaces_mutable_fields(service, imagine):
    created = service.create_song(imagine)

    updated = service.update_song(
        created.id,
        SongDTO(title="Imagine (Remastered)", artist="John Lennon", duration=185),
    )

    assert updated.id == created.id
    assert updated.title == "Imagine (Remastered)"
    assert updated.duration == 185
    # Alle Felder werden ersetzt, auch mit None
    assert updated.album is None
    assert updated.category is None
    assert updated.audio_url is None


def test_update_keeps_id_and_created_at(service, imagine):
    created = service.create_song(imagine)

    changes = SongDTO(
        id=12345,
        title="Imagine",
        artist="John Lennon",
        created_at=datetime(2000, 1, 1),
        updated_at=datetime(2000, 1, 1),
    )
    updated = service.update_song(created.id, changes)

    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at


def test_update_never_moves_updated_at_backwards(service, repository, imagine):
    created = service.create_song(imagine)
    future = datetime.now() + timedelta(days=365)
    song = repository.get_by_id(created.id)
    song.updated_at = future
    repository.save(song)

    updated = service.update_song(created.id, SongDTO(title="Imagine", artist="John Lennon"))

    assert updated.updated_at == future


def test_update_unknown_id_returns_none_without_mutation(imagine):
    repository = MagicMock(spec=SongRepository)
    repository.get_by_id.return_value = None
    service = SongService(song_repository=repository)

    assert service.update_song(999, imagine) is None
    repository.save.assert_not_called()
    repository.insert.assert_not_called()


def test_update_without_title_propagates_storage_error(service, imagine):
    created = service.create_song(imagine)

    with pytest.raises(IntegrityError):
        service.update_song(created.id, SongDTO(artist="John Lennon"))

    assert service.get_song_by_id(created.id).title == "Imagine"


# ========== DELETE ==========


def test_delete_twice(service, imagine):
    created = service.create_song(imagine)

    assert service.delete_song(created.id) is True
    assert service.get_song_by_id(created.id) is None
    assert service.delete_song(created.id) is False


def test_delete_unknown_id_has_no_side_effects():
    repository = MagicMock(spec=SongRepository)
    repository.exists_by_id.return_value = False
    service = SongService(song_repository=repository)

    assert service.delete_song(999) is False
    repository.delete_by_id.assert_not_called()


def test_delete_leaves_other_songs(service, imagine, bohemian):
    first = service.create_song(imagine)
    second = service.create_song(bohemian)

    service.delete_song(first.id)

    assert [song.id for song in service.get_all_songs()] == [second.id]


# ========== SEARCH ==========


@pytest.mark.parametrize("keyword", ["imagine", "IMAGINE", "Imag", "gin"])
def test_search_by_title_ignores_case(service, imagine, bohemian, keyword):
    service.create_song(imagine)
    service.create_song(bohemian)

    results = service.search_by_title(keyword)

    assert [song.title for song in results] == ["Imagine"]


def test_search_by_artist_returns_only_match(service, imagine, bohemian):
    first = service.create_song(imagine)
    service.create_song(bohemian)

    results = service.search_by_artist("lennon")

    assert results == [first]


def test_search_without_match_is_empty(service, imagine):
    service.create_song(imagine)

    assert service.search_by_title("yesterday") == []
    assert service.search_by_artist("beatles") == []


def test_get_songs_by_category_is_exact(service, imagine, bohemian):
    bohemian.category = "Pop"
    service.create_song(imagine)  # category "pop"
    service.create_song(bohemian)

    assert [song.title for song in service.get_songs_by_category("Pop")] == [
        "Bohemian Rhapsody"
    ]
    assert [song.title for song in service.get_songs_by_category("pop")] == ["Imagine"]
    assert service.get_songs_by_category("POP") == []


# ========== FEHLER DER DATENBANK ==========


def test_store_errors_propagate_unchanged():
    repository = MagicMock(spec=SongRepository)
    error = OperationalError("SELECT 1", {}, Exception("database is locked"))
    repository.get_all.side_effect = error
    service = SongService(song_repository=repository)

    with pytest.raises(OperationalError) as excinfo:
        service.get_all_songs()

    assert excinfo.value is error


def test_search_by_artist_ignores_case_of_umlauts(service, bohemian):
    motorhead = service.create_song(SongDTO(title="Été indien", artist="Motörhead"))
    service.create_song(bohemian)

    assert service.search_by_artist("MOTÖRHEAD") == [motorhead]
    assert service.search_by_title("été") == [motorhead]


def test_create_with_unstorable_duration_keeps_service_usable(service, imagine):
    imagine.duration = 10**20

    with pytest.raises(OverflowError):
        service.create_song(imagine)

    assert service.get_all_songs() == []
