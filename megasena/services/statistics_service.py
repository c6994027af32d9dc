"""Frequency and delay statistics over a draw history."""

from __future__ import annotations

from collections.abc import Sequence

from megasena.services.lottery_types import (
    MAX_NUMBER,
    MIN_NUMBER,
    NUMBERS_PER_DRAW,
    AnalysisData,
    Draw,
    NumberStat,
)


class DrawStatisticsAnalyzer:
    """Compute per-number count and delay.

    ``draws`` must be ordered most recent first (descending contest number).
    The order is trusted, not re-sorted: the first index at which a number
    shows up is its delay.
    """

    def analyze(self, draws: Sequence[Draw]) -> AnalysisData:
        counts: dict[int, int] = {n: 0 for n in range(MIN_NUMBER, MAX_NUMBER + 1)}
        last_seen: dict[int, int] = {}

        for index, draw in enumerate(draws):
            for n in draw.numbers:
                n = int(n)
                if n not in counts:
                    continue
                counts[n] += 1
                last_seen.setdefault(n, index)

        total_draws = len(draws)
        stats = [
            NumberStat(
                number=n,
                count=counts[n],
                # Never seen: report as more overdue than anything observed.
                delay=last_seen.get(n, total_draws),
            )
            for n in range(MIN_NUMBER, MAX_NUMBER + 1)
        ]

        pool_size = MAX_NUMBER - MIN_NUMBER + 1
        average_frequency = int(_round_half_up(total_draws * NUMBERS_PER_DRAW / pool_size))

        return AnalysisData(
            stats=stats,
            total_draws=total_draws,
            average_frequency=average_frequency,
        )


def _round_half_up(value: float) -> int:
    # round() in Python is banker's rounding; 2.5 must become 3 here.
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def most_frequent(analysis: AnalysisData, limit: int | None = None) -> list[NumberStat]:
    ordered = sorted(analysis.stats, key=lambda s: (-s.count, s.number))
    return ordered if limit is None else ordered[:limit]


def most_delayed(analysis: AnalysisData, limit: int | None = None) -> list[NumberStat]:
    ordered = sorted(analysis.stats, key=lambda s: (-s.delay, s.number))
    return ordered if limit is None else ordered[:limit]


def frequency_percentage(stat: NumberStat, total_draws: int) -> float:
    if total_draws <= 0:
        return 0.0
    return stat.count / total_draws * 100.0
