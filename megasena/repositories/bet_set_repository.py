"""Repository layer for generated bet history."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timezone
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from megasena.models.bet_set import BetSet
from megasena.services.lottery_types import GeneratedBetsSet, GenerationMode


def to_bets_set(row: BetSet) -> GeneratedBetsSet:
    created_at = row.created_at
    # SQLite drops tzinfo on the way back.
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return GeneratedBetsSet(
        id=str(row.set_id),
        timestamp=created_at,
        mode=GenerationMode(row.mode),
        bets=[tuple(int(n) for n in bet) for bet in (row.bets or [])],
        total_cost=Decimal(row.total_cost) if row.total_cost is not None else None,
    )


class BetSetRepository:
    """Append-only store of generation events, read newest first."""

    def list_newest_first(self, session: Session) -> Sequence[GeneratedBetsSet]:
        stmt = select(BetSet).order_by(BetSet.created_at.desc(), BetSet.seq.desc())
        return [to_bets_set(r) for r in session.scalars(stmt).all()]

    def get(self, session: Session, set_id: str) -> GeneratedBetsSet | None:
        row = session.scalar(select(BetSet).where(BetSet.set_id == str(set_id)))
        return to_bets_set(row) if row is not None else None

    def add(self, session: Session, bets_set: GeneratedBetsSet) -> GeneratedBetsSet:
        row = BetSet(
            set_id=bets_set.id,
            created_at=bets_set.timestamp,
            mode=bets_set.mode.value,
            total_cost=bets_set.total_cost,
            bets=[list(b) for b in bets_set.bets],
        )
        session.add(row)
        session.flush()
        return bets_set

    def delete_all(self, session: Session) -> int:
        result = session.execute(delete(BetSet))
        return int(result.rowcount or 0)
