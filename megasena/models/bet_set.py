"""A batch of generated bets (one generation action)."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from megasena.models.base import Base


class BetSet(Base):
    """Stored generation event. ``seq`` keeps insertion order."""

    __tablename__ = "bet_sets"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    set_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    mode: Mapped[str] = mapped_column(String(16), nullable=False)
    total_cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    # list of 6-number lists
    bets: Mapped[list] = mapped_column(JSON, nullable=False)
