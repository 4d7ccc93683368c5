"""Health-Check der API."""

import time
from flask import Blueprint, jsonify
from musicstream_server.extensions import db


def create_health_blueprint(version: str, url_prefix: str = "/api"):

    health_bp = Blueprint("health", __name__, url_prefix=url_prefix)

    @health_bp.route("/health", methods=["GET"])
    def health():
        """Prüft, ob die API läuft."""
        return jsonify(
            {
                "status": "UP",
                "version": version,
                "database": db.engine.dialect.name,
                "timestamp": int(time.time() * 1000),
            }
        )

    return health_bp
