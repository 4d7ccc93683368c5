"""Flask-Erweiterungen, die von der App-Factory initialisiert werden."""

import sqlite3
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()

# Name der SQL-Funktion, die SQLite-Verbindungen zusätzlich bekommen
CASEFOLD_FUNCTION = "py_casefold"


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def register_sqlite_functions(dbapi_connection, connection_record):
    """
    SQLites lower() und LIKE kennen nur ASCII, "Motörhead" und "MOTÖRHEAD"
    wären dort verschieden. Deshalb wird str.casefold als SQL-Funktion registriert.
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function(CASEFOLD_FUNCTION, 1, _casefold)
