"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, PuzzleId wrap the integer surrogate keys
    - OpenId is the external-provider identifier, unique per user
    - PuzzleDate is always a YYYY-MM-DD string (lexicographic order == calendar order)
    - All valid roles encoded as an Enum: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PuzzleId = NewType("PuzzleId", int)
OpenId = NewType("OpenId", str)


# ─── Value Types ─────────────────────────────────────────────────

PuzzleDate = NewType("PuzzleDate", str)   # YYYY-MM-DD

PUZZLE_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """User roles: maps to DB `role` column."""
    USER = "user"
    ADMIN = "admin"
