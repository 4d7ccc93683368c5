"""Factory für die Flask-Anwendung."""

import logging
from flask import Flask
from flask_cors import CORS
from musicstream_server.config import Config
from musicstream_server.extensions import db
from musicstream_server.helpers import setup_logging

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """
    Diese Funktion ist die "Application Factory".
    Sie erstellt und konfiguriert die gesamte Flask-Anwendung.
    """
    app = Flask(__name__)

    # 1. Konfiguration laden
    app.config.from_object(config_class)
    setup_logging(app.config["LOG_LEVEL"])

    # 2. Erweiterungen initialisieren
    db.init_app(app)

    with app.app_context():

        # Importiere Models (für create_all), Services und die Blueprint-Factories
        from . import models  # noqa: F401
        from .services.song_repository import SongRepository
        from .services.song_service import SongService
        from .routes.song_routes import create_song_blueprint
        from .routes.health_routes import create_health_blueprint

        db.create_all()

        # --- 3. Dependency Injection: Erstelle alle Service-Instanzen EINMAL ---

        song_repository = SongRepository()
        song_service = SongService(song_repository=song_repository)

        # --- 4. Blueprints registrieren ---

        api_prefix = app.config["API_PREFIX"]
        app.register_blueprint(create_song_blueprint(song_service, url_prefix=api_prefix))
        app.register_blueprint(
            create_health_blueprint(app.config["API_VERSION"], url_prefix=api_prefix)
        )

        # --- 5. CORS für das Frontend ---
        # Angefragte Header werden gespiegelt, "*" gilt mit Credentials nicht
        CORS(
            app,
            resources={
                rf"{api_prefix}/.*": {
                    "origins": app.config["CORS_ALLOWED_ORIGINS"],
                    "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                    "expose_headers": ["Location"],
                }
            },
            supports_credentials=True,
            max_age=3600,
        )

        logger.info("App gestartet mit Datenbank %s", db.engine.url.render_as_string())

    return app
