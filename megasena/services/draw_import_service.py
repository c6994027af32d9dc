"""Parse Mega-Sena result spreadsheets (CSV or XLSX) into draws.

Official exports and hand-made sheets disagree on layout, so columns are
found heuristically:

- the header row is the first of the top 25 rows mentioning "concurso";
- header names are normalized ("Bola 1" -> "bola1", "1ª Dezena" -> "1adezena");
- contest, date and the six ball columns are matched by name patterns.
"""

from __future__ import annotations

import csv
import io
import logging
import re
import unicodedata
from collections.abc import Sequence
from datetime import date, datetime, timedelta
from typing import Any

from openpyxl import load_workbook

from megasena.errors import ValidationError
from megasena.services.lottery_types import MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_DRAW, Draw

logger = logging.getLogger(__name__)

HEADER_SCAN_ROWS = 25
EXCEL_EPOCH = date(1899, 12, 30)
DATE_FORMAT = "%d/%m/%Y"

_DMY_RE = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$")
_KEY_STRIP_RE = re.compile(r"[\s_\W]", re.ASCII)


def normalize_key(key: Any) -> str:
    # NFKD folds "ª" to "a" and drops accents ("Nº" -> "no").
    folded = unicodedata.normalize("NFKD", str(key)).encode("ascii", "ignore").decode("ascii")
    return _KEY_STRIP_RE.sub("", folded.lower())


def _ball_keys(i: int) -> set[str]:
    return {
        f"bola{i}",
        f"bola0{i}",
        f"dezena{i}",
        f"dezena0{i}",
        f"dez{i}",
        f"dez0{i}",
        f"d{i}",
        f"d0{i}",
        f"{i}adezena",
        f"{i}ad",
        f"n{i}",
        f"num{i}",
    }


BALL_KEYS = {i: _ball_keys(i) for i in range(1, NUMBERS_PER_DRAW + 1)}


def parse_date(value: Any) -> date | None:
    """Accept date objects, Excel serials, DD/MM/YYYY, DD-MM-YYYY or ISO strings."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if value > 20000:
            return EXCEL_EPOCH + timedelta(days=int(value))
        return None

    text = str(value).strip()
    m = _DMY_RE.match(text)
    if m:
        day, month, year = (int(p) for p in m.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)


def find_header_row(rows: Sequence[Sequence[Any]]) -> int:
    for i, row in enumerate(rows[:HEADER_SCAN_ROWS]):
        joined = " ".join(str(cell).lower() for cell in row if cell is not None)
        if "concurso" in joined:
            return i
    return 0


def _row_to_draw(record: dict[str, Any]) -> Draw | None:
    keys = list(record.keys())
    contest_key = next((k for k in keys if "concurso" in k or k == "conc"), None)
    date_key = next((k for k in keys if "data" in k or "dt" in k), None)

    contest = _to_int(record.get(contest_key)) if contest_key else None
    draw_date = parse_date(record.get(date_key)) if date_key else None
    if not contest or draw_date is None:
        return None

    numbers: list[int] = []
    for i in range(1, NUMBERS_PER_DRAW + 1):
        ball_key = next((k for k in keys if k in BALL_KEYS[i]), None)
        if ball_key is None:
            continue
        n = _to_int(record.get(ball_key))
        if n is not None and MIN_NUMBER <= n <= MAX_NUMBER:
            numbers.append(n)

    unique = list(dict.fromkeys(numbers))
    if len(unique) < NUMBERS_PER_DRAW:
        return None

    return Draw(
        id=int(contest),
        date=draw_date.strftime(DATE_FORMAT),
        numbers=tuple(sorted(unique[:NUMBERS_PER_DRAW])),
    )


def rows_to_draws(rows: Sequence[Sequence[Any]]) -> list[Draw]:
    """Turn raw sheet rows into draws sorted by contest, newest first."""

    if not rows:
        return []

    header_idx = find_header_row(rows)
    header = [normalize_key(h) if h is not None else "" for h in rows[header_idx]]

    by_contest: dict[int, Draw] = {}
    for row in rows[header_idx + 1 :]:
        record: dict[str, Any] = {}
        for key, cell in zip(header, row):
            if key:
                record[key] = cell
        draw = _row_to_draw(record)
        if draw is not None:
            # Repeated contest numbers: the last row wins.
            by_contest[draw.id] = draw

    return sorted(by_contest.values(), key=lambda d: d.id, reverse=True)


def _read_csv_rows(content: bytes) -> list[list[Any]]:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = content.decode("latin-1")

    sample = text[:4096]
    try:
        dialect: Any = csv.Sniffer().sniff(sample, delimiters=";,\t")
    except csv.Error:
        dialect = csv.excel
    return [row for row in csv.reader(io.StringIO(text), dialect)]


def _read_xlsx_rows(content: bytes) -> list[list[Any]]:
    workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        return [list(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


class DrawImportService:
    """Read a results spreadsheet into draws, newest contest first."""

    def parse(self, filename: str, content: bytes) -> list[Draw]:
        name = (filename or "").lower()
        try:
            if name.endswith((".xlsx", ".xlsm")):
                rows = _read_xlsx_rows(content)
            else:
                rows = _read_csv_rows(content)
        except Exception as exc:
            logger.info("Unreadable spreadsheet %s", filename, exc_info=exc)
            raise ValidationError(
                message="Could not read the file. Make sure it is a valid Excel (.xlsx) or CSV file.",
                details={"file": [str(exc)]},
            ) from exc

        draws = rows_to_draws(rows)
        if not draws:
            raise ValidationError(
                message="Could not identify the 'Concurso', 'Data' and ball columns. Check the file format.",
                details={"file": ["No valid draws found"]},
            )

        logger.info("Parsed %d draws from %s", len(draws), filename)
        return draws
