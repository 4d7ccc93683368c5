"""Modul für die Song-Routen der MusicStream-App."""

import logging
from flask import Blueprint, request, jsonify, url_for
from sqlalchemy.exc import IntegrityError
from musicstream_server.app.dto import SongDTO
from musicstream_server.app.services.song_service import SongService

logger = logging.getLogger(__name__)


# Diese Funktion wird in __init__.py aufgerufen, um den Service zu übergeben
def create_song_blueprint(song_service: SongService, url_prefix: str = "/api"):

    songs_bp = Blueprint("songs_api", __name__, url_prefix=f"{url_prefix}/songs")

    def read_song_body():
        """Liest den JSON-Body als SongDTO, oder liefert eine 400-Antwort."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return None, (jsonify({"error": "Request-Body muss ein JSON-Objekt sein"}), 400)
        try:
            return SongDTO.from_dict(data), None
        except ValueError as e:
            return None, (jsonify({"error": str(e)}), 400)

    @songs_bp.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        # Pflichtfelder werden erst von der Datenbank geprüft
        logger.warning("Song konnte nicht gespeichert werden: %s", error.orig)
        return jsonify({"error": "Ungültige Song-Daten: title und artist sind Pflichtfelder"}), 400

    @songs_bp.route("", methods=["GET"])
    def get_all_songs():
        logger.info("GET %s - Alle Songs", request.path)
        songs = song_service.get_all_songs()
        return jsonify([song.to_dict() for song in songs])

    @songs_bp.route("/<int:song_id>", methods=["GET"])
    def get_song(song_id: int):
        logger.info("GET %s - Einzelner Song", request.path)
        song = song_service.get_song_by_id(song_id)
        if song is None:
            return "", 404
        return jsonify(song.to_dict())

    @songs_bp.route("", methods=["POST"])
    def create_song():
        song_dto, error = read_song_body()
        if error:
            return error

        logger.info("POST %s - Neuer Song: %s", request.path, song_dto.title)
        created = song_service.create_song(song_dto)

        response = jsonify(created.to_dict())
        response.status_code = 201
        response.headers["Location"] = url_for(".get_song", song_id=created.id)
        return response

    @songs_bp.route("/<int:song_id>", methods=["PUT"])
    def update_song(song_id: int):
        song_dto, error = read_song_body()
        if error:
            return error

        logger.info("PUT %s - Song aktualisieren", request.path)
        updated = song_service.update_song(song_id, song_dto)
        if updated is None:
            return "", 404
        return jsonify(updated.to_dict())

    @songs_bp.route("/<int:song_id>", methods=["DELETE"])
    def delete_song(song_id: int):
        logger.info("DELETE %s - Song löschen", request.path)
        if not song_service.delete_song(song_id):
            return "", 404
        return "", 204

    @songs_bp.route("/search/by-title", methods=["GET"])
    def search_by_title():
        keyword = request.args.get("q")
        if keyword is None:
            return jsonify({"error": "Benötigter Parameter fehlt: q"}), 400

        logger.info("GET %s - Suche nach Titel: %s", request.path, keyword)
        results = song_service.search_by_title(keyword)
        return jsonify([song.to_dict() for song in results])

    @songs_bp.route("/search/by-artist", methods=["GET"])
    def search_by_artist():
        keyword = request.args.get("q")
        if keyword is None:
            return jsonify({"error": "Benötigter Parameter fehlt: q"}), 400

        logger.info("GET %s - Suche nach Künstler: %s", request.path, keyword)
        results = song_service.search_by_artist(keyword)
        return jsonify([song.to_dict() for song in results])

    @songs_bp.route("/category/<category>", methods=["GET"])
    def get_songs_by_category(category: str):
        logger.info("GET %s - Songs der Kategorie %s", request.path, category)
        results = song_service.get_songs_by_category(category)
        return jsonify([song.to_dict() for song in results])

    return songs_bp
