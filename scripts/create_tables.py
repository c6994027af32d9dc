"""Create database tables in the configured database.

Reads DATABASE_URL (or PG* variables) from .env / environment and creates
all registered ORM tables.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import pathlib

from dotenv import load_dotenv

from megasena import models  # noqa: F401
from megasena.config import resolve_database_url
from megasena.db import create_app_engine
from megasena.models.base import Base

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]


def main() -> int:
    """Create all ORM tables in the target database."""

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)

    print("Tables created (or already exist).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
