"""Bet generation routes (controllers). No business logic here."""

from __future__ import annotations

from decimal import Decimal

from flask import Blueprint, current_app, request

from megasena.db import get_session
from megasena.schemas.bets import GeneratedBetsSetSchema, GenerateRequestSchema
from megasena.services.bet_generation_service import BetGenerationService
from megasena.utils.responses import ok

bets_bp = Blueprint("bets", __name__)

_request_schema = GenerateRequestSchema()
_set_schema = GeneratedBetsSetSchema()


def _service() -> BetGenerationService:
    return BetGenerationService(
        ai_client=current_app.extensions.get("ai_client"),
        max_bets=int(current_app.config["MAX_GENERATED_BETS"]),
    )


@bets_bp.post("/bets/generate")
def generate_bets():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    price = data.get("bet_price")
    if price is None:
        price = Decimal(current_app.config["BET_PRICE"])

    result = _service().generate(
        get_session(),
        mode=str(data["mode"]),
        count=int(data["count"]),
        bet_price=price,
        save=bool(data.get("save")),
    )
    return ok(
        {
            "mode": result.mode.value,
            "bets": [list(b) for b in result.bets],
            "bet_price": str(result.bet_price),
            "total_cost": str(result.total_cost),
            "saved_set": _set_schema.dump(result.saved_set) if result.saved_set is not None else None,
        },
        meta={"total": len(result.bets)},
    )
