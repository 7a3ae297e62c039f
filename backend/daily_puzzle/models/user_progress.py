"""UserProgress ORM: one row per (user, puzzle) tracking the latest submission.

Invariants:
    - At most one row per (user_id, puzzle_id) (unique constraint)
    - attempts increments by exactly 1 per submission, correct or not
    - solved/solved_at reflect the MOST RECENT submission only
    - solved stored as 0/1 integer

Design Decisions:
    - Integer solved column over Boolean: schema shared with the existing database
    - No relationship() to Puzzle: month queries join explicitly
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from daily_puzzle.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserProgress(Base):
    """Submission state of one user on one puzzle."""
    __tablename__ = "userProgress"
    __table_args__ = (
        UniqueConstraint("userId", "puzzleId", name="uq_user_progress_user_puzzle"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        "userId", Integer, ForeignKey("users.id"), nullable=False,
    )
    puzzle_id: Mapped[int] = mapped_column(
        "puzzleId", Integer, ForeignKey("puzzles.id"), nullable=False,
    )
    solved: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    solved_at: Mapped[datetime | None] = mapped_column(
        "solvedAt", DateTime(timezone=True), nullable=True,
    )
    attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
