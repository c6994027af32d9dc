"""Import a Mega-Sena results spreadsheet (CSV or XLSX) into the database.

Usage:
  python scripts/import_draws.py resultados.xlsx
  python scripts/import_draws.py resultados.csv --reset
  python scripts/import_draws.py resultados.csv --database-url sqlite:///./megasena.db
"""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Sequence

from dotenv import load_dotenv
from sqlalchemy.orm import sessionmaker
from tqdm import tqdm

from megasena import models  # noqa: F401
from megasena.config import resolve_database_url
from megasena.db import create_app_engine
from megasena.models.base import Base
from megasena.repositories.draw_repository import DrawRepository
from megasena.services.draw_import_service import DrawImportService


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import draw results from a CSV/XLSX file")
    parser.add_argument("path", type=pathlib.Path, help="Spreadsheet exported from the lottery site")
    parser.add_argument(
        "--database-url",
        dest="database_url",
        type=str,
        default=None,
        help="Override DB connection string (e.g. sqlite:///./megasena.db)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete every stored draw before importing",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    load_dotenv()

    database_url = str(args.database_url) if args.database_url else resolve_database_url()
    engine = create_app_engine(database_url)
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    draws = DrawImportService().parse(args.path.name, args.path.read_bytes())
    repo = DrawRepository()

    inserted = 0
    skipped = 0
    with SessionLocal() as db:
        if args.reset:
            removed = repo.delete_all(db)
            logger.info("Removed %d stored draws", removed)

        for draw in tqdm(draws, desc="Importing draws", unit="draw"):
            if repo.exists(db, draw.id):
                skipped += 1
                continue
            repo.add(db, draw)
            inserted += 1
        db.commit()

    logger.info("Done: %d inserted, %d already stored", inserted, skipped)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
