"""Score bets against draws."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from megasena.services.lottery_types import Bet, Draw, HistoricalMatch, normalize_numbers


DEFAULT_MIN_HITS = 4

PRIZE_TIERS = {
    6: "SENA",
    5: "QUINA",
    4: "QUADRA",
}


@dataclass(frozen=True)
class BetCheck:
    bet_index: int
    numbers: Bet
    hits: int
    matched_numbers: list[int]
    prize: str | None


def count_hits(bet: Iterable[int], draw_numbers: Iterable[int]) -> int:
    return len(set(int(n) for n in bet).intersection(int(n) for n in draw_numbers))


def prize_tier(hits: int) -> str | None:
    return PRIZE_TIERS.get(int(hits))


def scan_historical_matches(
    bets: Sequence[Sequence[int]],
    draws: Sequence[Draw],
    min_hits: int = DEFAULT_MIN_HITS,
) -> list[HistoricalMatch]:
    """Every (bet, draw) pair with at least ``min_hits`` hits.

    Sorted by contest number, newest first. Ties keep encounter order
    (bet by bet, then draw by draw).
    """

    matches: list[HistoricalMatch] = []
    for bet_index, bet in enumerate(bets, start=1):
        bet_numbers = tuple(int(n) for n in bet)
        for draw in draws:
            hits = count_hits(bet_numbers, draw.numbers)
            if hits >= min_hits:
                matches.append(
                    HistoricalMatch(
                        bet_index=bet_index,
                        bet_numbers=bet_numbers,
                        draw_id=int(draw.id),
                        draw_date=draw.date,
                        draw_numbers=tuple(draw.numbers),
                        hits=hits,
                    )
                )

    # list.sort is stable.
    matches.sort(key=lambda m: m.draw_id, reverse=True)
    return matches


def check_against_draw(bets: Sequence[Sequence[int]], winning_numbers: Iterable[int]) -> list[BetCheck]:
    """Hits of every bet against one target draw, in bet order."""

    winning = set(int(n) for n in winning_numbers)
    results: list[BetCheck] = []
    for bet_index, bet in enumerate(bets, start=1):
        numbers = normalize_numbers(bet)
        hits = count_hits(numbers, winning)
        results.append(
            BetCheck(
                bet_index=bet_index,
                numbers=numbers,
                hits=hits,
                matched_numbers=[n for n in numbers if n in winning],
                prize=prize_tier(hits),
            )
        )
    return results
