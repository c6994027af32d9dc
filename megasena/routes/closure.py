"""Closure (desdobramento) routes (controllers). No business logic here."""

from __future__ import annotations

from decimal import Decimal

from flask import Blueprint, current_app, request

from megasena.db import get_session
from megasena.schemas.bets import ClosureRequestSchema, GeneratedBetsSetSchema
from megasena.services.bet_history_service import BetHistoryService
from megasena.services.combination_service import ClosureService
from megasena.services.draw_store_service import DrawStoreService
from megasena.services.lottery_types import GenerationMode
from megasena.utils.responses import ok

closure_bp = Blueprint("closure", __name__)

_request_schema = ClosureRequestSchema()
_set_schema = GeneratedBetsSetSchema()
_draw_store = DrawStoreService()
_history = BetHistoryService()


def _closure_service() -> ClosureService:
    return ClosureService(
        min_pool=int(current_app.config["CLOSURE_MIN_POOL"]),
        max_pool=int(current_app.config["CLOSURE_MAX_POOL"]),
    )


@closure_bp.post("/closure/preview")
def preview_closure():
    """How many bets a pool would produce, without generating them."""

    data = _request_schema.load(request.get_json(silent=True) or {})
    preview = _closure_service().preview(data["numbers"])
    return ok(
        {
            "pool": preview.pool,
            "pool_size": preview.pool_size,
            "bet_count": preview.bet_count,
        }
    )


@closure_bp.post("/closure")
def generate_closure():
    data = _request_schema.load(request.get_json(silent=True) or {})
    result = _closure_service().generate(data["numbers"])

    saved = None
    if data.get("save"):
        # Closures are filed under the "intelligent" mode at zero cost, like hand-picked pools.
        saved = _history.record(
            get_session(),
            result.bets,
            GenerationMode.INTELLIGENT,
            total_cost=Decimal("0"),
        )

    return ok(
        {
            "pool": result.pool,
            "bets": [list(b) for b in result.bets],
            "saved_set": _set_schema.dump(saved) if saved is not None else None,
        },
        meta={"total": len(result.bets)},
    )


@closure_bp.get("/closure/suggested-pool")
def suggested_pool():
    """The 10 most frequent numbers as a starting pool."""

    analysis = _draw_store.analysis(get_session())
    if analysis.total_draws == 0:
        return ok({"pool": [], "total_draws": 0})
    return ok({"pool": ClosureService.suggested_pool(analysis), "total_draws": analysis.total_draws})
