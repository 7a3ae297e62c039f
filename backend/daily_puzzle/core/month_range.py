"""Month Ranges: prefix and calendar-aware bounds for puzzle dates.

Invariants:
    - Puzzle dates are YYYY-MM-DD strings, so string order == calendar order
    - month_date_range upper bound is the real last day of the month
      (2025-02 → 2025-02-28, 2024-02 → 2024-02-29)
    - month outside 1..12 raises InputValidationError

Design Decisions:
    - Calendar-aware bound over a fixed "-31": never matches nonexistent dates
    - filter_puzzles_for_month preserves input order (callers pass date-ascending lists)
"""

import calendar
from typing import Iterable, TypeVar

from daily_puzzle.core.errors import InputValidationError
from daily_puzzle.core.repository_protocols import PuzzleLike

P = TypeVar("P", bound=PuzzleLike)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InputValidationError(
            f"month must be between 1 and 12, got {month}", "month",
        )


def month_prefix(year: int, month: int) -> str:
    """'2025-3' → '2025-03'."""
    _check_month(month)
    return f"{year}-{month:02d}"


def month_date_range(year: int, month: int) -> tuple[str, str]:
    """Inclusive (first, last) puzzle dates of the month."""
    prefix = month_prefix(year, month)
    last_day = calendar.monthrange(year, month)[1]
    return f"{prefix}-01", f"{prefix}-{last_day:02d}"


def filter_puzzles_for_month(puzzles: Iterable[P], year: int, month: int) -> list[P]:
    prefix = month_prefix(year, month)
    return [p for p in puzzles if p.date.startswith(prefix)]
