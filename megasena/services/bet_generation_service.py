"""Business logic for generating bet batches (random or AI-assisted)."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.orm import Session

from megasena.errors import ValidationError
from megasena.services.bet_history_service import BetHistoryService
from megasena.services.draw_store_service import DrawStoreService
from megasena.services.intelligent_bet_client import IntelligentBetClient
from megasena.services.lottery_types import Bet, GeneratedBetsSet, GenerationMode
from megasena.services.random_bet_service import generate_random

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class GenerationResult:
    mode: GenerationMode
    bets: list[Bet]
    bet_price: Decimal
    total_cost: Decimal
    saved_set: GeneratedBetsSet | None = None


class BetGenerationService:
    """Produce a batch of bets, price it and optionally keep it in history."""

    def __init__(
        self,
        ai_client: IntelligentBetClient | None = None,
        draw_store: DrawStoreService | None = None,
        history: BetHistoryService | None = None,
        max_bets: int = 50,
        rng: random.Random | None = None,
    ) -> None:
        self._ai_client = ai_client
        self._draw_store = draw_store or DrawStoreService()
        self._history = history or BetHistoryService()
        self._max_bets = int(max_bets)
        self._rng = rng

    def generate(
        self,
        session: Session,
        mode: str,
        count: int,
        bet_price: Decimal,
        save: bool = False,
    ) -> GenerationResult:
        try:
            generation_mode = GenerationMode(mode)
        except ValueError as exc:
            raise ValidationError(
                message="Invalid mode",
                details={"mode": ["Must be one of intelligent|random"]},
            ) from exc

        if count < 1 or count > self._max_bets:
            raise ValidationError(
                message="Invalid count",
                details={"count": [f"Must be between 1 and {self._max_bets}"]},
            )
        price = Decimal(bet_price)
        if price < 0:
            raise ValidationError(message="Invalid bet_price", details={"bet_price": ["Must be >= 0"]})

        if generation_mode is GenerationMode.RANDOM:
            bets = generate_random(count, rng=self._rng)
        else:
            bets = self._generate_intelligent(session, count)

        total_cost = (price * len(bets)).quantize(CENTS)
        logger.info("Generated %d %s bets (total %s)", len(bets), generation_mode.value, total_cost)

        saved = None
        if save:
            saved = self._history.record(session, bets, generation_mode, total_cost=total_cost)

        return GenerationResult(
            mode=generation_mode,
            bets=bets,
            bet_price=price.quantize(CENTS),
            total_cost=total_cost,
            saved_set=saved,
        )

    def _generate_intelligent(self, session: Session, count: int) -> list[Bet]:
        analysis = self._draw_store.analysis(session)
        if analysis.total_draws == 0:
            raise ValidationError(
                message="Import draw results before using intelligent generation",
                details={"mode": ["No draws available for analysis"]},
            )
        if self._ai_client is None:
            raise ValidationError(message="Intelligent generation is not available")
        return self._ai_client.generate(analysis, count)
