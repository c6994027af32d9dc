"""Health check routes."""

from __future__ import annotations

from flask import Blueprint
from sqlalchemy import text

from megasena.db import get_session
from megasena.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint (also pings the database)."""

    get_session().execute(text("SELECT 1"))
    return ok({"status": "ok"})
