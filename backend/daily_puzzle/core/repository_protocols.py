"""Boundary Protocols: structural contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - ORM rows satisfy these protocols structurally; core never sees SQLAlchemy

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from typing import Protocol


class PuzzleLike(Protocol):
    """Structural contract for Puzzle rows passed to pure answer/month logic."""
    date: str
    answer: str
    location: str
    latitude: str | None
    longitude: str | None
