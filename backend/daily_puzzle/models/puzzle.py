"""Puzzle ORM: one daily puzzle with its answer and reveal location.

Invariants:
    - date is a unique YYYY-MM-DD string (at most one puzzle per day)
    - answer, location, latitude, longitude are secret until solved
    - Read-only from the application: rows come from an external seeding process

Design Decisions:
    - date as String(10), not Date: lexicographic order matches calendar order and
      month filtering is a prefix match
    - latitude/longitude as strings: passed through to the map untouched
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from daily_puzzle.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Puzzle(Base):
    """Daily puzzle."""
    __tablename__ = "puzzles"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    date: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    # riddle, word, logic, ...
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    answer: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[str | None] = mapped_column(String(20), nullable=True)
    longitude: Mapped[str | None] = mapped_column(String(20), nullable=True)
    hint: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
