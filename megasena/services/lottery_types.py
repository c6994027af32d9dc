"""Value types shared by the statistics, combination and matching services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable


MIN_NUMBER = 1
MAX_NUMBER = 60
NUMBERS_PER_DRAW = 6

Bet = tuple[int, ...]


class GenerationMode(str, Enum):
    INTELLIGENT = "intelligent"
    RANDOM = "random"


@dataclass(frozen=True)
class Draw:
    """One historical result: contest number, display date and six numbers."""

    id: int
    date: str
    numbers: Bet


@dataclass(frozen=True)
class NumberStat:
    number: int
    count: int
    delay: int


@dataclass(frozen=True)
class AnalysisData:
    stats: list[NumberStat]
    total_draws: int
    average_frequency: int


@dataclass(frozen=True)
class GeneratedBetsSet:
    id: str
    timestamp: datetime
    mode: GenerationMode
    bets: list[Bet] = field(default_factory=list)
    total_cost: Decimal | None = None


@dataclass(frozen=True)
class HistoricalMatch:
    bet_index: int
    bet_numbers: Bet
    draw_id: int
    draw_date: str
    draw_numbers: Bet
    hits: int


def normalize_numbers(numbers: Iterable[int]) -> Bet:
    return tuple(sorted(int(n) for n in numbers))


def is_valid_bet(numbers: Iterable[int]) -> bool:
    """True when ``numbers`` holds exactly six distinct values within 1..60."""

    nums = [int(n) for n in numbers]
    if len(nums) != NUMBERS_PER_DRAW or len(set(nums)) != NUMBERS_PER_DRAW:
        return False
    return all(MIN_NUMBER <= n <= MAX_NUMBER for n in nums)
