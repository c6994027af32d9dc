"""Checker routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from megasena.db import get_session
from megasena.errors import ValidationError
from megasena.schemas.checker import BetCheckSchema, DrawCheckRequestSchema, HistoricalMatchSchema
from megasena.services.checker_service import CheckerService
from megasena.utils.responses import ok

checker_bp = Blueprint("checker", __name__)

_request_schema = DrawCheckRequestSchema()
_checks_schema = BetCheckSchema(many=True)
_matches_schema = HistoricalMatchSchema(many=True)
_service = CheckerService()


@checker_bp.post("/checker/draw")
def check_draw():
    """Check every stored bet against one draw (typed numbers or a stored contest)."""

    data = _request_schema.load(request.get_json(silent=True) or {})
    result = _service.check_draw(
        get_session(),
        winning_numbers=data.get("numbers"),
        contest_no=data.get("contest_no"),
    )
    return ok(
        {
            "winning_numbers": list(result.winning_numbers),
            "contest_no": result.contest_no,
            "checks": _checks_schema.dump(result.checks),
        },
        meta={"total": len(result.checks), "winners": sum(1 for c in result.checks if c.prize)},
    )


@checker_bp.get("/checker/history")
def check_history():
    """Would any stored bet have won quadra/quina/sena in a past contest?

    Query params:
    - min_hits: optional threshold (default 4, quadra)
    """

    raw = (request.args.get("min_hits") or "").strip()
    min_hits = int(current_app.config["DEFAULT_MIN_HITS"])
    if raw:
        try:
            min_hits = int(raw)
        except ValueError as e:
            raise ValidationError("min_hits must be an integer") from e

    result = _service.check_history(get_session(), min_hits=min_hits)
    return ok(
        {
            "total_bets": result.total_bets,
            "total_draws": result.total_draws,
            "min_hits": result.min_hits,
            "matches": _matches_schema.dump(result.matches),
        },
        meta={"total": len(result.matches)},
    )
