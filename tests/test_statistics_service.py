from __future__ import annotations

from megasena.services.lottery_types import Draw
from megasena.services.statistics_service import (
    DrawStatisticsAnalyzer,
    frequency_percentage,
    most_delayed,
    most_frequent,
)


def _stat(analysis, number):
    return next(s for s in analysis.stats if s.number == number)


def test_counts_and_delays_follow_most_recent_first_order():
    draws = [
        Draw(id=2, date="", numbers=(1, 2, 3, 4, 5, 6)),
        Draw(id=1, date="", numbers=(1, 7, 8, 9, 10, 11)),
    ]
    analysis = DrawStatisticsAnalyzer().analyze(draws)

    assert (_stat(analysis, 1).count, _stat(analysis, 1).delay) == (2, 0)
    assert (_stat(analysis, 2).count, _stat(analysis, 2).delay) == (1, 0)
    assert (_stat(analysis, 7).count, _stat(analysis, 7).delay) == (1, 1)
    assert (_stat(analysis, 60).count, _stat(analysis, 60).delay) == (0, 2)


def test_totals_and_ordering(sample_draws):
    analysis = DrawStatisticsAnalyzer().analyze(sample_draws)

    assert analysis.total_draws == 3
    assert len(analysis.stats) == 60
    assert [s.number for s in analysis.stats] == list(range(1, 61))
    assert sum(s.count for s in analysis.stats) == 3 * 6


def test_empty_history_is_all_zero():
    analysis = DrawStatisticsAnalyzer().analyze([])

    assert analysis.total_draws == 0
    assert analysis.average_frequency == 0
    assert all(s.count == 0 and s.delay == 0 for s in analysis.stats)


def test_average_frequency_rounds_half_up():
    # 25 draws * 6 / 60 = 2.5
    draws = [Draw(id=i, date="", numbers=(1, 2, 3, 4, 5, 6)) for i in range(25, 0, -1)]
    assert DrawStatisticsAnalyzer().analyze(draws).average_frequency == 3

    draws = [Draw(id=i, date="", numbers=(1, 2, 3, 4, 5, 6)) for i in range(100, 0, -1)]
    assert DrawStatisticsAnalyzer().analyze(draws).average_frequency == 10


def test_order_is_trusted_not_resorted():
    oldest_first = [
        Draw(id=1, date="", numbers=(1, 7, 8, 9, 10, 11)),
        Draw(id=2, date="", numbers=(1, 2, 3, 4, 5, 6)),
    ]
    analysis = DrawStatisticsAnalyzer().analyze(oldest_first)

    assert _stat(analysis, 7).delay == 0
    assert _stat(analysis, 2).delay == 1


def test_analyze_is_idempotent(sample_draws):
    analyzer = DrawStatisticsAnalyzer()
    assert analyzer.analyze(sample_draws) == analyzer.analyze(sample_draws)


def test_rankings(sample_draws):
    analysis = DrawStatisticsAnalyzer().analyze(sample_draws)

    top = most_frequent(analysis, 2)
    assert [s.number for s in top] == [1, 5]

    delayed = most_delayed(analysis, 3)
    # Never drawn numbers share the sentinel delay (3); ties by number.
    assert [s.number for s in delayed] == [13, 14, 15]
    assert all(s.delay == 3 for s in delayed)


def test_frequency_percentage(sample_draws):
    analysis = DrawStatisticsAnalyzer().analyze(sample_draws)
    stat = next(s for s in analysis.stats if s.number == 1)

    assert round(frequency_percentage(stat, analysis.total_draws), 2) == 66.67
    assert frequency_percentage(stat, 0) == 0.0
