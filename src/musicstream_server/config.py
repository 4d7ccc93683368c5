"""Konfiguration für die Flask-Anwendung."""

import os
from dotenv import load_dotenv

# Lade die Variablen aus der .env-Datei in die Umgebungsvariablen des Systems
load_dotenv()


def _database_uri() -> str:
    """Ermittelt den Connection String aus der Umgebung."""
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    # Fallback auf MySQL, wenn die einzelnen DB-Variablen gesetzt sind
    if os.getenv("DB_HOST"):
        return (
            f"mysql+pymysql://{os.getenv('DB_USER')}:{os.getenv('DB_PASSWORD')}"
            f"@{os.getenv('DB_HOST')}/{os.getenv('DB_NAME')}"
        )

    return "sqlite:///musicstream.db"


class Config:
    """Konfiguration für die Flask-Anwendung."""

    # Flask Secret Key
    SECRET_KEY = os.getenv("FLASK_SECRET")

    # Datenbank-Konfiguration
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = (
        {"pool_recycle": 28000}  # Pool-Recycling-Zeit in Sekunden
        if SQLALCHEMY_DATABASE_URI.startswith("mysql")
        else {}
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # API
    API_PREFIX = os.getenv("API_PREFIX", "/api")
    API_VERSION = os.getenv("API_VERSION", "1.0.0")

    # CORS: das Angular-Frontend läuft standardmäßig auf Port 4200
    CORS_ALLOWED_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ALLOWED_ORIGINS", "http://localhost:4200,http://127.0.0.1:4200"
        ).split(",")
        if origin.strip()
    ]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))


class TestConfig(Config):
    """Konfiguration für die Tests (In-Memory-Datenbank)."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
