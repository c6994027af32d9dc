"""Uniformly random bets."""

from __future__ import annotations

import random

from megasena.services.lottery_types import MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_DRAW, Bet


def generate_random(count: int, rng: random.Random | None = None) -> list[Bet]:
    """``count`` independent bets of six distinct ascending numbers.

    Bets are not deduplicated across the batch.
    """

    source = rng or random
    bets: list[Bet] = []
    for _ in range(int(count)):
        numbers: set[int] = set()
        while len(numbers) < NUMBERS_PER_DRAW:
            numbers.add(source.randint(MIN_NUMBER, MAX_NUMBER))
        bets.append(tuple(sorted(numbers)))
    return bets
