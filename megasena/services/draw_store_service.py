"""Business logic for the stored draw history."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from megasena.errors import ConflictError, NotFoundError, ValidationError
from megasena.repositories.draw_repository import DrawRepository
from megasena.services.lottery_types import (
    MAX_NUMBER,
    MIN_NUMBER,
    AnalysisData,
    Draw,
    is_valid_bet,
    normalize_numbers,
)
from megasena.services.statistics_service import DrawStatisticsAnalyzer

logger = logging.getLogger(__name__)


class DrawStoreService:
    """Draw history use-cases. Analysis is recomputed from the store on every call."""

    def __init__(
        self,
        repository: DrawRepository | None = None,
        analyzer: DrawStatisticsAnalyzer | None = None,
    ) -> None:
        self._repo = repository or DrawRepository()
        self._analyzer = analyzer or DrawStatisticsAnalyzer()

    def list_draws(self, session: Session) -> Sequence[Draw]:
        return self._repo.list_recent_first(session)

    def get_draw(self, session: Session, contest_no: int) -> Draw:
        draw = self._repo.get(session, contest_no)
        if draw is None:
            raise NotFoundError(message=f"Contest {contest_no} not found")
        return draw

    def add_draw(self, session: Session, contest_no: int, date: str, numbers: Iterable[int]) -> Draw:
        nums = [int(n) for n in numbers]
        if not is_valid_bet(nums):
            raise ValidationError(
                message="Invalid numbers",
                details={"numbers": [f"A draw needs 6 unique numbers within {MIN_NUMBER}..{MAX_NUMBER}"]},
            )
        if int(contest_no) <= 0:
            raise ValidationError(
                message="Invalid contest_no",
                details={"contest_no": ["Must be positive"]},
            )
        if self._repo.exists(session, contest_no):
            raise ConflictError(message=f"Contest {contest_no} already exists")

        draw = Draw(id=int(contest_no), date=str(date), numbers=normalize_numbers(nums))
        self._repo.add(session, draw)
        logger.info("Added contest %d", draw.id)
        return draw

    def replace_all(self, session: Session, draws: Iterable[Draw]) -> int:
        """Replace the whole history, as a fresh spreadsheet import does."""

        removed = self._repo.delete_all(session)
        added = self._repo.add_many(session, draws)
        logger.info("Replaced draw history (%d removed, %d added)", removed, added)
        return added

    def clear(self, session: Session) -> int:
        return self._repo.delete_all(session)

    def analysis(self, session: Session) -> AnalysisData:
        return self._analyzer.analyze(self._repo.list_recent_first(session))
