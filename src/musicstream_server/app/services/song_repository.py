"""Module for managing song data in the database."""

import logging
from sqlalchemy import func
from musicstream_server.extensions import db, CASEFOLD_FUNCTION
from musicstream_server.app.models import Song

logger = logging.getLogger(__name__)


class SongRepository:
    """
    Kapselt den gesamten Datenbankzugriff auf die Tabelle "songs".

    Alle Listen werden nach ID sortiert zurückgegeben, damit die Reihenfolge
    innerhalb eines Snapshots stabil ist.
    """

    def insert(self, song: Song) -> Song:
        """
        Speichert einen neuen Song in der Datenbank.

        Die ID wird von der Datenbank vergeben, falls keine gesetzt ist.
        Zeitstempel müssen vom Aufrufer gesetzt sein.
        """
        db.session.add(song)
        self._commit()
        return song

    def save(self, song: Song) -> Song:
        """
        Überschreibt einen bestehenden Song vollständig.

        Raises:
            ValueError: Wenn kein Song mit der ID des Objekts existiert.
        """
        # Kein Autoflush: geänderte Felder sollen erst beim Commit geschrieben werden
        with db.session.no_autoflush:
            exists = song.id is not None and self.exists_by_id(song.id)
        if not exists:
            db.session.rollback()
            raise ValueError(
                f"Update fehlgeschlagen: Song mit ID {song.id} nicht gefunden."
            )

        # merge liefert für bereits geladene Objekte dieselbe Instanz zurück
        with db.session.no_autoflush:
            merged = db.session.merge(song)
        self._commit()
        return merged

    def get_by_id(self, song_id: int) -> Song | None:
        return db.session.get(Song, song_id)

    def get_all(self) -> list[Song]:
        return Song.query.order_by(Song.id).all()

    def exists_by_id(self, song_id: int) -> bool:
        return (
            db.session.query(Song.id).filter(Song.id == song_id).first() is not None
        )

    def delete_by_id(self, song_id: int):
        """Löscht den Song. Der Aufrufer prüft vorher mit exists_by_id."""
        Song.query.filter(Song.id == song_id).delete()
        self._commit()

    def find_by_category(self, category: str) -> list[Song]:
        """Exakter, case-sensitiver Vergleich der Kategorie."""
        return Song.query.filter(Song.category == category).order_by(Song.id).all()

    def find_by_artist(self, artist: str) -> list[Song]:
        """Exakter, case-sensitiver Vergleich des Künstlers."""
        return Song.query.filter(Song.artist == artist).order_by(Song.id).all()

    def find_by_title_containing(self, keyword: str) -> list[Song]:
        """Titel enthält das Stichwort (Groß-/Kleinschreibung egal)."""
        return (
            Song.query.filter(self._contains_ignore_case(Song.title, keyword))
            .order_by(Song.id)
            .all()
        )

    def find_by_artist_containing(self, keyword: str) -> list[Song]:
        """Künstler enthält das Stichwort (Groß-/Kleinschreibung egal)."""
        return (
            Song.query.filter(self._contains_ignore_case(Song.artist, keyword))
            .order_by(Song.id)
            .all()
        )

    def _commit(self):
        try:
            db.session.commit()
        except Exception as e:
            # Session wieder benutzbar machen, der Fehler geht an den Aufrufer
            db.session.rollback()
            logger.warning("Commit fehlgeschlagen, Session zurückgesetzt: %s", e)
            raise

    @staticmethod
    def _contains_ignore_case(column, keyword: str):
        # Auf SQLite wird mit str.casefold verglichen, sonst mit lower() der Datenbank
        if db.engine.dialect.name == "sqlite":
            folded_column = getattr(func, CASEFOLD_FUNCTION)(column, type_=column.type)
            folded_keyword = keyword.casefold()
        else:
            folded_column = func.lower(column, type_=column.type)
            folded_keyword = keyword.lower()
        # autoescape: % und _ im Stichwort werden wörtlich gesucht
        return folded_column.contains(folded_keyword, autoescape=True)
