"""Draw history routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from megasena.db import get_session
from megasena.errors import ValidationError
from megasena.schemas.draw import DrawCreateSchema, DrawSchema
from megasena.services.draw_import_service import DrawImportService
from megasena.services.draw_store_service import DrawStoreService
from megasena.utils.responses import created, ok

draws_bp = Blueprint("draws", __name__)

_draw_schema = DrawSchema()
_draws_schema = DrawSchema(many=True)
_create_schema = DrawCreateSchema()
_service = DrawStoreService()
_importer = DrawImportService()


@draws_bp.get("/draws")
def list_draws():
    """List stored draws, most recent contest first."""

    draws = _service.list_draws(get_session())
    return ok(_draws_schema.dump(draws), meta={"total": len(draws)})


@draws_bp.get("/draws/<int:contest_no>")
def get_draw(contest_no: int):
    draw = _service.get_draw(get_session(), contest_no)
    return ok(_draw_schema.dump(draw))


@draws_bp.post("/draws")
def add_draw():
    """Add one draw typed in by hand."""

    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    draw = _service.add_draw(
        get_session(),
        contest_no=int(data["contest_no"]),
        date=str(data.get("date") or ""),
        numbers=data["numbers"],
    )
    return created(_draw_schema.dump(draw))


@draws_bp.post("/draws/import")
def import_draws():
    """Replace the stored history with the contents of an uploaded CSV/XLSX file."""

    upload = request.files.get("file")
    if upload is None or not upload.filename:
        raise ValidationError(message="Missing file", details={"file": ["Upload a .csv or .xlsx file"]})

    draws = _importer.parse(upload.filename, upload.read())
    imported = _service.replace_all(get_session(), draws)
    return ok(
        {
            "imported": imported,
            "latest_contest": draws[0].id,
            "oldest_contest": draws[-1].id,
        }
    )


@draws_bp.delete("/draws")
def clear_draws():
    removed = _service.clear(get_session())
    return ok({"removed": removed})
