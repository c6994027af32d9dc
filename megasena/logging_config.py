"""Logging configuration."""

from __future__ import annotations

import logging
from flask import Flask

# Chatty third-party loggers kept at WARNING regardless of LOG_LEVEL.
QUIET_LOGGERS = ("sqlalchemy.engine", "urllib3", "openpyxl")


def configure_logging(app: Flask) -> None:
    """Configure stdlib logging from ``LOG_LEVEL`` and ``LOG_FORMAT``."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = str(app.config.get("LOG_FORMAT") or "%(asctime)s %(levelname)s %(name)s %(message)s")

    logging.basicConfig(level=level, format=fmt)
    logging.getLogger("megasena").setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
