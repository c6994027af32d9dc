"""Binomial counting and full closure (desdobramento) generation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from megasena.errors import ValidationError
from megasena.services.lottery_types import (
    MAX_NUMBER,
    MIN_NUMBER,
    NUMBERS_PER_DRAW,
    AnalysisData,
    Bet,
)
from megasena.services.statistics_service import most_frequent

logger = logging.getLogger(__name__)

DEFAULT_MIN_POOL = NUMBERS_PER_DRAW
# C(12, 6) = 924 bets.
DEFAULT_MAX_POOL = 12
SUGGESTED_POOL_SIZE = 10


def count_combinations(n: int, k: int) -> int:
    """Return C(n, k); 0 for k outside [0, n]."""

    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1
    if k > n - k:
        k = n - k

    # Each partial product is itself C(n, i), so floor division stays exact.
    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) // i
    return result


def generate_combinations(pool: Sequence[int], k: int) -> list[list[int]]:
    """All k-element subsequences of ``pool``, lexicographic by index.

    Each combination keeps the relative order of ``pool``. Callers are
    responsible for bounding ``len(pool)``.
    """

    result: list[list[int]] = []
    if k < 0 or k > len(pool):
        return result

    current: list[int] = []

    def backtrack(start: int) -> None:
        if len(current) == k:
            result.append(list(current))
            return
        for i in range(start, len(pool)):
            current.append(pool[i])
            backtrack(i + 1)
            current.pop()

    backtrack(0)
    return result


@dataclass(frozen=True)
class ClosurePreview:
    pool: list[int]
    pool_size: int
    bet_count: int


@dataclass(frozen=True)
class ClosureResult:
    pool: list[int]
    bets: list[Bet]


class ClosureService:
    """Generate every 6-number bet inside a bounded pool of chosen numbers."""

    def __init__(self, min_pool: int = DEFAULT_MIN_POOL, max_pool: int = DEFAULT_MAX_POOL) -> None:
        self._min_pool = int(min_pool)
        self._max_pool = int(max_pool)

    def _validated_pool(self, numbers: Sequence[int]) -> list[int]:
        pool = [int(n) for n in numbers]
        if len(pool) != len(set(pool)):
            raise ValidationError(
                message="Invalid numbers",
                details={"numbers": ["Numbers must be unique"]},
            )
        if any(n < MIN_NUMBER or n > MAX_NUMBER for n in pool):
            raise ValidationError(
                message="Invalid numbers",
                details={"numbers": [f"All numbers must be within {MIN_NUMBER}..{MAX_NUMBER}"]},
            )
        if len(pool) < self._min_pool:
            raise ValidationError(
                message="Invalid numbers",
                details={"numbers": [f"Select at least {self._min_pool} numbers"]},
            )
        if len(pool) > self._max_pool:
            raise ValidationError(
                message="Invalid numbers",
                details={
                    "numbers": [
                        f"Closure is limited to {self._max_pool} numbers "
                        f"({count_combinations(self._max_pool, NUMBERS_PER_DRAW)} bets)"
                    ]
                },
            )
        return sorted(pool)

    def preview(self, numbers: Sequence[int]) -> ClosurePreview:
        pool = self._validated_pool(numbers)
        return ClosurePreview(
            pool=pool,
            pool_size=len(pool),
            bet_count=count_combinations(len(pool), NUMBERS_PER_DRAW),
        )

    def generate(self, numbers: Sequence[int]) -> ClosureResult:
        pool = self._validated_pool(numbers)
        bets = [tuple(c) for c in generate_combinations(pool, NUMBERS_PER_DRAW)]
        logger.info("Generated closure of %d bets from pool %s", len(bets), pool)
        return ClosureResult(pool=pool, bets=bets)

    @staticmethod
    def suggested_pool(analysis: AnalysisData, size: int = SUGGESTED_POOL_SIZE) -> list[int]:
        """Most frequent numbers, ascending, as a ready-made pool."""

        return sorted(s.number for s in most_frequent(analysis, size))
