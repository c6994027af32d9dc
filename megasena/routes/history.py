"""Generated bets history routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from megasena.db import get_session
from megasena.schemas.bets import GeneratedBetsSetSchema, HistoryCreateSchema
from megasena.services.bet_history_service import BetHistoryService
from megasena.utils.responses import created, ok

history_bp = Blueprint("history", __name__)

_set_schema = GeneratedBetsSetSchema()
_sets_schema = GeneratedBetsSetSchema(many=True)
_create_schema = HistoryCreateSchema()
_service = BetHistoryService()


@history_bp.get("/history")
def list_history():
    """All generation events, newest first."""

    sets = _service.list_sets(get_session())
    return ok(_sets_schema.dump(sets), meta={"total": len(sets), "total_bets": sum(len(s.bets) for s in sets)})


@history_bp.get("/history/<string:set_id>")
def get_history_set(set_id: str):
    return ok(_set_schema.dump(_service.get_set(get_session(), set_id)))


@history_bp.post("/history")
def add_history_set():
    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    bets_set = _service.record(
        get_session(),
        data["bets"],
        str(data["mode"]),
        total_cost=data.get("total_cost"),
    )
    return created(_set_schema.dump(bets_set))


@history_bp.delete("/history")
def clear_history():
    return ok({"removed": _service.clear(get_session())})
