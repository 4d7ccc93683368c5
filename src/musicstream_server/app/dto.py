"""Module for Data Transfer Objects (DTOs) used in the application."""

from musicstream_server.app.models import Song
from musicstream_server.helpers import format_timestamp, parse_timestamp

TEXT_FIELDS = ("title", "artist", "album", "genre", "category", "audioUrl", "imageUrl")

# Grenzen einer BIGINT-Spalte
MIN_DURATION = -(2**63)
MAX_DURATION = 2**63 - 1


class SongDTO:
    """DTO for transferring song data"""

    def __init__(
        self,
        id: int | None = None,
        title: str | None = None,
        artist: str | None = None,
        album: str | None = None,
        genre: str | None = None,
        category: str | None = None,
        duration: int | None = None,
        audio_url: str | None = None,
        image_url: str | None = None,
        created_at=None,
        updated_at=None,
    ):
        self.id = id
        self.title = title
        self.artist = artist
        self.album = album
        self.genre = genre
        self.category = category
        self.duration = duration
        self.audio_url = audio_url
        self.image_url = image_url
        self.created_at = created_at
        self.updated_at = updated_at

    def __eq__(self, other):
        if not isinstance(other, SongDTO):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return f"<SongDTO {self.title} - {self.artist} (ID: {self.id})>"

    @staticmethod
    def from_entity(song: Song | None) -> "SongDTO | None":
        """
        Wandelt ein Song-Objekt in ein DTO um.

        Gibt None zurück, wenn kein Song übergeben wird, damit sich die
        Methode direkt auf das Ergebnis eines Lookups anwenden lässt.
        """
        if song is None:
            return None
        return SongDTO(
            id=song.id,
            title=song.title,
            artist=song.artist,
            album=song.album,
            genre=song.genre,
            category=song.category,
            duration=song.duration,
            audio_url=song.audio_url,
            image_url=song.image_url,
            created_at=song.created_at,
            updated_at=song.updated_at,
        )

    def to_entity(self) -> Song:
        """
        Wandelt das DTO in ein (noch nicht gespeichertes) Song-Objekt um.

        ID und Zeitstempel werden unverändert übernommen, das Bereinigen
        ist Aufgabe des Aufrufers.
        """
        return Song(
            id=self.id,
            title=self.title,
            artist=self.artist,
            album=self.album,
            genre=self.genre,
            category=self.category,
            duration=self.duration,
            audio_url=self.audio_url,
            image_url=self.image_url,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_dict(self) -> dict:
        """JSON-Darstellung mit den Feldnamen des Frontends."""
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "genre": self.genre,
            "category": self.category,
            "duration": self.duration,
            "audioUrl": self.audio_url,
            "imageUrl": self.image_url,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SongDTO":
        """
        Baut ein DTO aus einem JSON-Body.

        Raises:
            ValueError: Wenn ein Textfeld kein String ist, duration keine
                Ganzzahl im 64-Bit-Bereich ist oder ein Zeitstempel nicht im
                ISO-Format vorliegt.
        """
        for field in TEXT_FIELDS:
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field} muss ein Text sein")

        duration = data.get("duration")
        if duration is not None:
            if isinstance(duration, bool) or not isinstance(duration, (int, str)):
                raise ValueError("duration muss eine Ganzzahl sein")
            try:
                duration = int(duration)
            except ValueError:
                raise ValueError("duration muss eine Ganzzahl sein") from None
            if not MIN_DURATION <= duration <= MAX_DURATION:
                raise ValueError("duration liegt ausserhalb des erlaubten Bereichs")

        return cls(
            id=data.get("id"),
            title=data.get("title"),
            artist=data.get("artist"),
            album=data.get("album"),
            genre=data.get("genre"),
            category=data.get("category"),
            duration=duration,
            audio_url=data.get("audioUrl"),
            image_url=data.get("imageUrl"),
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )
