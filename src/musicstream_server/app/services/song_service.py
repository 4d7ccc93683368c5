"""Module für die Geschäftslogik rund um Songs."""

import logging
from musicstream_server.app.dto import SongDTO
from musicstream_server.app.models import Song
from musicstream_server.app.services.song_repository import SongRepository
from musicstream_server.helpers import utcnow

logger = logging.getLogger(__name__)


class SongService:
    """
    Enthält die Kernlogik für den Song-Katalog.

    "Nicht gefunden" ist nie ein Fehler: Lookups liefern None, Suchen eine
    leere Liste und delete_song False. Fehler der Datenbank (z.B. fehlender
    Titel oder Künstler) werden unverändert an den Aufrufer weitergereicht.
    """

    def __init__(self, song_repository: SongRepository):
        self.song_repository = song_repository

    def get_all_songs(self) -> list[SongDTO]:
        logger.info("Lade alle Songs")
        return self._to_dtos(self.song_repository.get_all())

    def get_song_by_id(self, song_id: int) -> SongDTO | None:
        logger.info("Lade Song mit ID %s", song_id)
        return SongDTO.from_entity(self.song_repository.get_by_id(song_id))

    def create_song(self, song_dto: SongDTO) -> SongDTO:
        """
        Legt einen neuen Song an.

        Eine vom Client mitgeschickte ID wird verworfen, damit immer ein
        neuer Datensatz entsteht. createdAt und updatedAt bekommen denselben
        Zeitstempel.
        """
        logger.info("Erstelle neuen Song: %s", song_dto.title)

        song = song_dto.to_entity()

        # Immer eine neue Einfügung, nie ein Überschreiben
        song.id = None

        now = utcnow()
        song.created_at = now
        song.updated_at = now

        saved_song = self.song_repository.insert(song)

        logger.info("Song erstellt mit ID %s", saved_song.id)
        return SongDTO.from_entity(saved_song)

    def update_song(self, song_id: int, song_dto: SongDTO) -> SongDTO | None:
        """
        Überschreibt alle änderbaren Felder eines bestehenden Songs.

        ID und createdAt bleiben unverändert, updatedAt wird auf die aktuelle
        Zeit gesetzt (aber nie zurückgedreht). Gibt None zurück, wenn kein
        Song mit der ID existiert.
        """
        logger.info("Aktualisiere Song mit ID %s", song_id)

        song = self.song_repository.get_by_id(song_id)
        if song is None:
            logger.warning("Update für unbekannten Song %s", song_id)
            return None

        self._apply_changes(song, song_dto)

        now = utcnow()
        if song.updated_at is not None and now < song.updated_at:
            now = song.updated_at
        song.updated_at = now

        updated_song = self.song_repository.save(song)

        logger.info("Song aktualisiert: %s", song_id)
        return SongDTO.from_entity(updated_song)

    def delete_song(self, song_id: int) -> bool:
        """Löscht einen Song. Gibt False zurück, wenn er nicht existiert."""
        logger.info("Lösche Song mit ID %s", song_id)

        # Prüfen und Löschen sind zwei getrennte Schritte, nicht atomar
        if not self.song_repository.exists_by_id(song_id):
            logger.warning("Löschen eines nicht existierenden Songs: %s", song_id)
            return False

        self.song_repository.delete_by_id(song_id)
        logger.info("Song gelöscht: %s", song_id)
        return True

    def search_by_title(self, keyword: str) -> list[SongDTO]:
        logger.info("Suche Songs nach Titel: %s", keyword)
        return self._to_dtos(self.song_repository.find_by_title_containing(keyword))

    def search_by_artist(self, keyword: str) -> list[SongDTO]:
        logger.info("Suche Songs nach Künstler: %s", keyword)
        return self._to_dtos(self.song_repository.find_by_artist_containing(keyword))

    def get_songs_by_category(self, category: str) -> list[SongDTO]:
        logger.info("Lade Songs der Kategorie: %s", category)
        return self._to_dtos(self.song_repository.find_by_category(category))

    @staticmethod
    def _apply_changes(song: Song, song_dto: SongDTO):
        song.title = song_dto.title
        song.artist = song_dto.artist
        song.album = song_dto.album
        song.genre = song_dto.genre
        song.category = song_dto.category
        song.duration = song_dto.duration
        song.audio_url = song_dto.audio_url
        song.image_url = song_dto.image_url

    @staticmethod
    def _to_dtos(songs: list[Song]) -> list[SongDTO]:
        return [SongDTO.from_entity(song) for song in songs]
