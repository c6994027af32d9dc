from __future__ import annotations

import random
from decimal import Decimal

import pytest

from megasena.errors import ConflictError, NotFoundError, ValidationError
from megasena.services.bet_generation_service import BetGenerationService
from megasena.services.bet_history_service import BetHistoryService
from megasena.services.checker_service import CheckerService
from megasena.services.draw_store_service import DrawStoreService
from megasena.services.lottery_types import GenerationMode


class FakeAiClient:
    def __init__(self):
        self.seen = None

    def generate(self, analysis, count):
        self.seen = (analysis, count)
        return [(1, 2, 3, 4, 5, 6)] * count


def test_draw_store_add_list_and_analysis(session, sample_draws):
    store = DrawStoreService()
    store.replace_all(session, reversed(sample_draws))
    store.add_draw(session, 4, "11/01/2025", [60, 1, 30, 2, 40, 3])
    session.commit()

    draws = store.list_draws(session)
    assert [d.id for d in draws] == [4, 3, 2, 1]
    assert draws[0].numbers == (1, 2, 3, 30, 40, 60)

    analysis = store.analysis(session)
    assert analysis.total_draws == 4
    one = next(s for s in analysis.stats if s.number == 1)
    assert (one.count, one.delay) == (3, 0)


def test_draw_store_rejects_duplicates_and_bad_numbers(session, sample_draws):
    store = DrawStoreService()
    store.replace_all(session, sample_draws)

    with pytest.raises(ConflictError):
        store.add_draw(session, 3, "", [1, 2, 3, 4, 5, 6])
    with pytest.raises(ValidationError):
        store.add_draw(session, 9, "", [1, 2, 3, 4, 5, 5])
    with pytest.raises(ValidationError):
        store.add_draw(session, 9, "", [1, 2, 3, 4, 5, 61])
    with pytest.raises(NotFoundError):
        store.get_draw(session, 999)


def test_replace_all_drops_previous_history(session, sample_draws):
    store = DrawStoreService()
    store.replace_all(session, sample_draws)
    store.replace_all(session, sample_draws[:1])

    assert [d.id for d in store.list_draws(session)] == [3]


def test_history_newest_first_and_flattened(session):
    history = BetHistoryService()
    first = history.record(session, [[6, 5, 4, 3, 2, 1]], "random", total_cost=Decimal("5"))
    second = history.record(session, [[10, 20, 30, 40, 50, 60], [7, 8, 9, 10, 11, 12]], GenerationMode.INTELLIGENT)
    session.commit()

    sets = history.list_sets(session)
    assert [s.id for s in sets] == [second.id, first.id]
    assert sets[1].bets == [(1, 2, 3, 4, 5, 6)]
    assert sets[1].total_cost == Decimal("5.00")
    assert sets[0].total_cost is None
    assert sets[0].mode is GenerationMode.INTELLIGENT
    assert first.id.startswith("set-")

    assert history.all_bets(session) == [(10, 20, 30, 40, 50, 60), (7, 8, 9, 10, 11, 12), (1, 2, 3, 4, 5, 6)]
    assert history.get_set(session, first.id).bets == [(1, 2, 3, 4, 5, 6)]


def test_history_validation(session):
    history = BetHistoryService()
    with pytest.raises(ValidationError):
        history.record(session, [[1, 2, 3]], "random")
    with pytest.raises(ValidationError):
        history.record(session, [], "random")
    with pytest.raises(ValidationError):
        history.record(session, [[1, 2, 3, 4, 5, 6]], "lucky")


def test_random_generation_prices_and_saves(session):
    service = BetGenerationService(rng=random.Random(7))
    result = service.generate(session, "random", 3, Decimal("5.00"), save=True)

    assert len(result.bets) == 3
    assert result.total_cost == Decimal("15.00")
    assert result.saved_set is not None
    assert BetHistoryService().list_sets(session)[0].total_cost == Decimal("15.00")


def test_generation_count_bounds(session):
    service = BetGenerationService(max_bets=10)
    with pytest.raises(ValidationError):
        service.generate(session, "random", 11, Decimal("5"))
    with pytest.raises(ValidationError):
        service.generate(session, "random", 0, Decimal("5"))


def test_intelligent_generation_uses_current_analysis(session, sample_draws):
    DrawStoreService().replace_all(session, sample_draws)
    ai = FakeAiClient()

    result = BetGenerationService(ai_client=ai).generate(session, "intelligent", 2, Decimal("6"))

    assert result.bets == [(1, 2, 3, 4, 5, 6)] * 2
    assert result.total_cost == Decimal("12.00")
    assert ai.seen[0].total_draws == 3
    assert ai.seen[1] == 2


def test_intelligent_generation_needs_draws(session):
    with pytest.raises(ValidationError):
        BetGenerationService(ai_client=FakeAiClient()).generate(session, "intelligent", 2, Decimal("6"))


def test_checker_against_contest_and_history(session, sample_draws):
    DrawStoreService().replace_all(session, sample_draws)
    BetHistoryService().record(session, [[1, 2, 3, 4, 30, 31], [5, 12, 23, 34, 45, 56]], "random")

    checker = CheckerService()
    result = checker.check_draw(session, contest_no=2)
    assert result.winning_numbers == (1, 2, 3, 4, 5, 6)
    assert [c.hits for c in result.checks] == [4, 1]
    assert result.checks[0].prize == "QUADRA"

    history = checker.check_history(session)
    assert history.total_bets == 2
    assert history.total_draws == 3
    assert [(m.draw_id, m.bet_index, m.hits) for m in history.matches] == [(3, 2, 6), (2, 1, 4)]


def test_checker_manual_numbers_validation(session):
    with pytest.raises(ValidationError):
        CheckerService().check_draw(session, winning_numbers=[1, 2, 3])
    with pytest.raises(ValidationError):
        CheckerService().check_draw(session)
