from __future__ import annotations

from megasena.services import matcher_service
from megasena.services.lottery_types import Draw
from megasena.services.matcher_service import (
    check_against_draw,
    count_hits,
    prize_tier,
    scan_historical_matches,
)


def test_count_hits():
    assert count_hits([1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 7, 8]) == 4
    assert count_hits([1, 2, 3, 4, 5, 6], [7, 8, 9, 10, 11, 12]) == 0
    assert count_hits([1, 2, 3, 4, 5, 6], [6, 5, 4, 3, 2, 1]) == 6


def test_prize_tier():
    assert prize_tier(6) == "SENA"
    assert prize_tier(5) == "QUINA"
    assert prize_tier(4) == "QUADRA"
    assert prize_tier(3) is None


def test_scan_sorts_by_contest_descending():
    draws = [
        Draw(id=10, date="d10", numbers=(1, 2, 3, 4, 50, 51)),
        Draw(id=30, date="d30", numbers=(1, 2, 3, 4, 5, 52)),
        Draw(id=20, date="d20", numbers=(40, 41, 42, 43, 44, 45)),
    ]
    bets = [(1, 2, 3, 4, 5, 6)]

    matches = scan_historical_matches(bets, draws, min_hits=4)

    assert [m.draw_id for m in matches] == [30, 10]
    assert [m.hits for m in matches] == [5, 4]
    assert matches[0].bet_index == 1
    assert matches[0].draw_date == "d30"
    assert matches[0].draw_numbers == (1, 2, 3, 4, 5, 52)


def test_scan_reports_each_qualifying_draw_once():
    draws = [
        Draw(id=2, date="", numbers=(1, 2, 3, 4, 30, 31)),
        Draw(id=1, date="", numbers=(1, 2, 3, 4, 40, 41)),
    ]
    matches = scan_historical_matches([(1, 2, 3, 4, 5, 6)], draws)

    assert [(m.bet_index, m.draw_id) for m in matches] == [(1, 2), (1, 1)]


def test_scan_ties_keep_encounter_order():
    draws = [Draw(id=7, date="", numbers=(1, 2, 3, 4, 5, 6))]
    bets = [(1, 2, 3, 4, 20, 21), (1, 2, 3, 4, 5, 22), (1, 2, 3, 4, 5, 6)]

    matches = scan_historical_matches(bets, draws)

    assert [m.bet_index for m in matches] == [1, 2, 3]
    assert [m.hits for m in matches] == [4, 5, 6]


def test_scan_threshold_and_empty_inputs():
    draws = [Draw(id=1, date="", numbers=(1, 2, 3, 10, 11, 12))]
    bets = [(1, 2, 3, 4, 5, 6)]

    assert scan_historical_matches(bets, draws) == []
    assert len(scan_historical_matches(bets, draws, min_hits=3)) == 1
    assert scan_historical_matches([], draws) == []
    assert scan_historical_matches(bets, []) == []


def test_check_against_draw():
    checks = check_against_draw([(6, 5, 4, 3, 2, 1), (10, 20, 30, 40, 50, 60)], [1, 2, 3, 4, 5, 9])

    assert checks[0].bet_index == 1
    assert checks[0].numbers == (1, 2, 3, 4, 5, 6)
    assert checks[0].hits == 5
    assert checks[0].matched_numbers == [1, 2, 3, 4, 5]
    assert checks[0].prize == "QUINA"
    assert checks[1].hits == 0
    assert checks[1].prize is None


def test_scan_and_check_count_hits_the_same_way(monkeypatch):
    calls = []

    def recording_count_hits(bet, draw_numbers):
        calls.append((tuple(bet), tuple(draw_numbers)))
        return count_hits(bet, draw_numbers)

    monkeypatch.setattr(matcher_service, "count_hits", recording_count_hits)
    draws = [Draw(id=7, date="", numbers=(1, 2, 3, 4, 5, 6))]

    matcher_service.scan_historical_matches([(1, 2, 3, 4, 50, 60)], draws)
    matcher_service.check_against_draw([(1, 2, 3, 4, 50, 60)], [1, 2, 3, 4, 5, 6])

    assert len(calls) == 2
