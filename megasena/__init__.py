"""Mega-Sena statistics and bet generation service (Flask application package)."""

from __future__ import annotations

from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: dict[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: config values applied after the environment config
            (tests use this to point at a scratch database).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from megasena.config import get_config
    from megasena.db import init_db
    from megasena.error_handlers import register_error_handlers
    from megasena.logging_config import configure_logging
    from megasena.routes.analysis import analysis_bp
    from megasena.routes.bets import bets_bp
    from megasena.routes.checker import checker_bp
    from megasena.routes.closure import closure_bp
    from megasena.routes.draws import draws_bp
    from megasena.routes.health import health_bp
    from megasena.routes.history import history_bp
    from megasena.routes.storage import storage_bp
    from megasena.services.intelligent_bet_client import IntelligentBetClient

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    register_error_handlers(app)

    app.extensions["ai_client"] = IntelligentBetClient(
        api_key=str(app.config.get("GEMINI_API_KEY") or ""),
        model=str(app.config["GEMINI_MODEL"]),
        base_url=str(app.config["GEMINI_BASE_URL"]),
        timeout_seconds=float(app.config["GEMINI_TIMEOUT_SECONDS"]),
    )

    app.register_blueprint(health_bp)
    app.register_blueprint(draws_bp)
    app.register_blueprint(analysis_bp)
    app.register_blueprint(closure_bp)
    app.register_blueprint(bets_bp)
    app.register_blueprint(history_bp)
    app.register_blueprint(checker_bp)
    app.register_blueprint(storage_bp)

    return app
