"""Repository layer for draw result persistence."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from megasena.models.draw_result import DrawResult
from megasena.services.lottery_types import Draw


def to_draw(row: DrawResult) -> Draw:
    return Draw(id=int(row.contest_no), date=str(row.draw_date or ""), numbers=row.numbers)


def to_row(draw: Draw) -> DrawResult:
    n = sorted(int(x) for x in draw.numbers)
    return DrawResult(
        contest_no=int(draw.id),
        draw_date=str(draw.date),
        number1=n[0],
        number2=n[1],
        number3=n[2],
        number4=n[3],
        number5=n[4],
        number6=n[5],
    )


class DrawRepository:
    """CRUD for stored draws. Lists are always most recent contest first."""

    def list_recent_first(self, session: Session) -> Sequence[Draw]:
        stmt = select(DrawResult).order_by(DrawResult.contest_no.desc())
        return [to_draw(r) for r in session.scalars(stmt).all()]

    def get(self, session: Session, contest_no: int) -> Draw | None:
        row = session.get(DrawResult, int(contest_no))
        return to_draw(row) if row is not None else None

    def exists(self, session: Session, contest_no: int) -> bool:
        return session.get(DrawResult, int(contest_no)) is not None

    def add(self, session: Session, draw: Draw) -> Draw:
        session.add(to_row(draw))
        session.flush()
        return draw

    def add_many(self, session: Session, draws: Iterable[Draw]) -> int:
        rows = [to_row(d) for d in draws]
        session.add_all(rows)
        session.flush()
        return len(rows)

    def delete_all(self, session: Session) -> int:
        result = session.execute(delete(DrawResult))
        return int(result.rowcount or 0)
