"""Entry point für die Flask-Anwendung."""

# pylint: disable=E0611
from musicstream_server.app import create_app

# Erstelle die Anwendungsinstanz mit der Factory
app = create_app()


def main():
    """
    Der Haupteinstiegspunkt für das Skript.
    Startet den Flask-Entwicklungsserver.
    Für die Produktion würdest du hier einen WSGI-Server wie gunicorn starten.
    """
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=False)


if __name__ == "__main__":
    main()
