"""Module for defining the database models used in the application."""

from sqlalchemy import CheckConstraint
from musicstream_server.extensions import db


class Song(db.Model):
    __tablename__ = "songs"
    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_songs_title_not_empty"),
        CheckConstraint("length(artist) > 0", name="ck_songs_artist_not_empty"),
        # Ohne AUTOINCREMENT vergibt SQLite gelöschte IDs erneut
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    artist = db.Column(db.String(255), nullable=False)
    album = db.Column(db.String(255), nullable=True)
    genre = db.Column(db.String(100), nullable=True)
    category = db.Column(db.String(100), nullable=True)
    duration = db.Column(db.BigInteger, nullable=True)  # Sekunden
    audio_url = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False)
    updated_at = db.Column(db.DateTime, nullable=False)

    def __repr__(self):
        return f"<Song {self.title} - {self.artist} (ID: {self.id})>"
