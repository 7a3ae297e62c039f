"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Puzzle is read-only; User and UserProgress are written by the store

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from daily_puzzle.models.user import User  # noqa: F401
from daily_puzzle.models.puzzle import Puzzle  # noqa: F401
from daily_puzzle.models.user_progress import UserProgress  # noqa: F401
