"""ORM models."""

from megasena.models.bet_set import BetSet
from megasena.models.draw_result import DrawResult

__all__ = ["BetSet", "DrawResult"]
