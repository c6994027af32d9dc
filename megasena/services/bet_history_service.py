"""Business logic for the generated bets history."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.orm import Session

from megasena.errors import NotFoundError, ValidationError
from megasena.repositories.bet_set_repository import BetSetRepository
from megasena.services.lottery_types import (
    Bet,
    GeneratedBetsSet,
    GenerationMode,
    is_valid_bet,
    normalize_numbers,
)

logger = logging.getLogger(__name__)


class BetHistoryService:
    """Record generation events and read them back newest first."""

    def __init__(self, repository: BetSetRepository | None = None) -> None:
        self._repo = repository or BetSetRepository()

    def record(
        self,
        session: Session,
        bets: Iterable[Iterable[int]],
        mode: str | GenerationMode,
        total_cost: Decimal | None = None,
    ) -> GeneratedBetsSet:
        try:
            generation_mode = GenerationMode(mode)
        except ValueError as exc:
            raise ValidationError(
                message="Invalid mode",
                details={"mode": ["Must be one of intelligent|random"]},
            ) from exc

        normalized: list[Bet] = []
        bad_idx: list[int] = []
        for i, bet in enumerate(bets, start=1):
            nums = [int(n) for n in bet]
            if not is_valid_bet(nums):
                bad_idx.append(i)
                continue
            normalized.append(normalize_numbers(nums))

        if bad_idx:
            raise ValidationError(
                message="Invalid bets",
                details={"bets": [f"Each bet must be 6 unique numbers within 1..60 (bad items: {', '.join(str(i) for i in bad_idx)})"]},
            )
        if not normalized:
            raise ValidationError(message="Invalid bets", details={"bets": ["At least one bet is required"]})
        if total_cost is not None and Decimal(total_cost) < 0:
            raise ValidationError(message="Invalid total_cost", details={"total_cost": ["Must be >= 0"]})

        bets_set = GeneratedBetsSet(
            id=f"set-{uuid.uuid4().hex}",
            timestamp=datetime.now(timezone.utc),
            mode=generation_mode,
            bets=normalized,
            total_cost=Decimal(total_cost).quantize(Decimal("0.01")) if total_cost is not None else None,
        )
        self._repo.add(session, bets_set)
        logger.info("Recorded %s set %s with %d bets", generation_mode.value, bets_set.id, len(normalized))
        return bets_set

    def list_sets(self, session: Session) -> Sequence[GeneratedBetsSet]:
        return self._repo.list_newest_first(session)

    def get_set(self, session: Session, set_id: str) -> GeneratedBetsSet:
        bets_set = self._repo.get(session, set_id)
        if bets_set is None:
            raise NotFoundError(message=f"Bet set {set_id} not found")
        return bets_set

    def all_bets(self, session: Session) -> list[Bet]:
        """Every stored bet, flattened from the newest set to the oldest."""

        return [bet for bets_set in self._repo.list_newest_first(session) for bet in bets_set.bets]

    def clear(self, session: Session) -> int:
        return self._repo.delete_all(session)
