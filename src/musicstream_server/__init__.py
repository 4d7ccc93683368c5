"""MusicStream Server: REST-Backend für den Song-Katalog."""

__version__ = "1.0.0"
