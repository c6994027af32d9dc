"""Storage maintenance routes."""

from __future__ import annotations

import logging

from flask import Blueprint

from megasena.db import get_session
from megasena.services.bet_history_service import BetHistoryService
from megasena.services.draw_store_service import DrawStoreService
from megasena.utils.responses import ok

logger = logging.getLogger(__name__)

storage_bp = Blueprint("storage", __name__)

_draw_store = DrawStoreService()
_history = BetHistoryService()


@storage_bp.delete("/storage")
def clear_storage():
    """Permanently remove every stored draw and every generated bet set."""

    session = get_session()
    draws_removed = _draw_store.clear(session)
    sets_removed = _history.clear(session)
    logger.warning("Storage cleared (%d draws, %d bet sets)", draws_removed, sets_removed)
    return ok({"draws_removed": draws_removed, "bet_sets_removed": sets_removed})
