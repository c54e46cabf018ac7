"""Application factory for the rotaplan web API."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from flask.typing import ResponseReturnValue

from rotaplan.adapters.config_loader import ConfigError, build_config
from rotaplan.domain.calendar import InvalidDate

from .routes import bp as schedule_bp


DEFAULT_CONFIG: dict[str, Any] = {
    "ROTAPLAN_CONFIG_FILE": None,
    "ROTAPLAN": None,
}


def create_app(config: dict[str, Any] | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)

    if config:
        app.config.update(config)

    app.config["ROTAPLAN"] = build_config(app.config.get("ROTAPLAN_CONFIG_FILE"), app.config.get("ROTAPLAN"))

    app.register_blueprint(schedule_bp)

    @app.get("/healthz")
    def healthcheck() -> tuple[str, int]:
        return "OK", 200

    @app.errorhandler(InvalidDate)
    @app.errorhandler(ConfigError)
    def bad_request(exc: ValueError) -> ResponseReturnValue:
        return jsonify({"ok": False, "error": str(exc)}), 400

    return app
