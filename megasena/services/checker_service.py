"""Business logic for checking generated bets against results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from megasena.errors import ValidationError
from megasena.services.bet_history_service import BetHistoryService
from megasena.services.draw_store_service import DrawStoreService
from megasena.services.lottery_types import Bet, HistoricalMatch, is_valid_bet, normalize_numbers
from megasena.services.matcher_service import (
    DEFAULT_MIN_HITS,
    BetCheck,
    check_against_draw,
    scan_historical_matches,
)


@dataclass(frozen=True)
class DrawCheckResult:
    winning_numbers: Bet
    contest_no: int | None
    checks: list[BetCheck]


@dataclass(frozen=True)
class HistoryCheckResult:
    total_bets: int
    total_draws: int
    min_hits: int
    matches: list[HistoricalMatch]


class CheckerService:
    """Check the whole bet history against one draw or against every stored draw."""

    def __init__(
        self,
        draw_store: DrawStoreService | None = None,
        history: BetHistoryService | None = None,
    ) -> None:
        self._draw_store = draw_store or DrawStoreService()
        self._history = history or BetHistoryService()

    def check_draw(
        self,
        session: Session,
        winning_numbers: Iterable[int] | None = None,
        contest_no: int | None = None,
    ) -> DrawCheckResult:
        if contest_no is not None:
            winning = self._draw_store.get_draw(session, contest_no).numbers
        elif winning_numbers is not None:
            nums = [int(n) for n in winning_numbers]
            if not is_valid_bet(nums):
                raise ValidationError(
                    message="Invalid numbers",
                    details={"numbers": ["Enter 6 unique numbers within 1..60"]},
                )
            winning = normalize_numbers(nums)
        else:
            raise ValidationError(
                message="Missing draw",
                details={"numbers": ["Provide numbers or contest_no"]},
            )

        bets = self._history.all_bets(session)
        return DrawCheckResult(
            winning_numbers=winning,
            contest_no=int(contest_no) if contest_no is not None else None,
            checks=check_against_draw(bets, winning),
        )

    def check_history(self, session: Session, min_hits: int = DEFAULT_MIN_HITS) -> HistoryCheckResult:
        if min_hits < 0 or min_hits > 6:
            raise ValidationError(message="Invalid min_hits", details={"min_hits": ["Must be within 0..6"]})

        bets = self._history.all_bets(session)
        draws = self._draw_store.list_draws(session)
        return HistoryCheckResult(
            total_bets=len(bets),
            total_draws=len(draws),
            min_hits=int(min_hits),
            matches=scan_historical_matches(bets, draws, min_hits=min_hits),
        )
