"""Analysis routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from megasena.db import get_session
from megasena.errors import ValidationError
from megasena.schemas.analysis import AnalysisSchema, NumberStatSchema
from megasena.services.draw_store_service import DrawStoreService
from megasena.services.statistics_service import frequency_percentage, most_delayed, most_frequent
from megasena.utils.responses import ok

analysis_bp = Blueprint("analysis", __name__)

_analysis_schema = AnalysisSchema()
_stats_schema = NumberStatSchema(many=True)
_service = DrawStoreService()


@analysis_bp.get("/analysis")
def get_analysis():
    """Return count/delay for 1..60 over the stored history.

    Query params:
    - limit: size of the most frequent / most delayed rankings (default 10)
    """

    raw_limit = (request.args.get("limit") or "").strip()
    limit = 10
    if raw_limit:
        try:
            limit = int(raw_limit)
        except ValueError as e:
            raise ValidationError("limit must be an integer") from e
        if not (1 <= limit <= 60):
            raise ValidationError("limit must be between 1 and 60")

    analysis = _service.analysis(get_session())
    data = _analysis_schema.dump(analysis)

    top = most_frequent(analysis, limit)
    data["most_frequent"] = [
        {**s, "percentage": round(frequency_percentage(stat, analysis.total_draws), 2)}
        for s, stat in zip(_stats_schema.dump(top), top)
    ]
    data["most_delayed"] = _stats_schema.dump(most_delayed(analysis, limit))
    return ok(data)
