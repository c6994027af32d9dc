"""Historical draw results stored in one wide table.

Columns:
- contest_no (PK)
- draw_date (display string, DD/MM/YYYY)
- number1..number6 (ascending)
"""

from __future__ import annotations

from sqlalchemy import Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from megasena.models.base import Base


class DrawResult(Base):
    """One row per contest with its 6 numbers."""

    __tablename__ = "draw_results"

    contest_no: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    draw_date: Mapped[str] = mapped_column(String(32), nullable=False, default="")

    number1: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number2: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number3: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number4: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number5: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number6: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    @property
    def numbers(self) -> tuple[int, ...]:
        return (
            int(self.number1),
            int(self.number2),
            int(self.number3),
            int(self.number4),
            int(self.number5),
            int(self.number6),
        )
