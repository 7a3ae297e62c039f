"""Puzzle Routes: lookup by date, month listing, answer submission, monthly progress.

Invariants:
    - by-date and month are public; submit and progress require an identity
    - by-date returns null for a date without a puzzle (no 404)
    - Responses use PuzzleResponse: answer and reveal fields never leave via reads
    - progress is always scoped to the caller's own user id

Design Decisions:
    - Thin routes: submission logic in services/submissions.py, filtering in core/
    - month listing filters all puzzles by date prefix (puzzle count is small, one per day)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from daily_puzzle.api.dependencies import get_store, require_identity
from daily_puzzle.core.domain_types import PUZZLE_DATE_PATTERN
from daily_puzzle.core.month_range import filter_puzzles_for_month
from daily_puzzle.models.user import User
from daily_puzzle.schemas.puzzle import (
    MonthQuery, ProgressResponse, PuzzleResponse, SubmissionResult, SubmitAnswer,
)
from daily_puzzle.services.puzzle_store import PuzzleStore
from daily_puzzle.services.submissions import submit_answer

router = APIRouter(prefix="/api/v1/puzzles", tags=["puzzles"])


@router.get("/by-date/{date}", response_model=PuzzleResponse | None)
async def get_by_date(
    date: str = Path(pattern=PUZZLE_DATE_PATTERN),
    store: PuzzleStore = Depends(get_store),
):
    """Puzzle for a YYYY-MM-DD date, or null."""
    return await store.get_puzzle_by_date(date)


@router.get("/month", response_model=list[PuzzleResponse])
async def get_all_for_month(
    query: Annotated[MonthQuery, Query()],
    store: PuzzleStore = Depends(get_store),
):
    """Puzzles of one month, ascending by date."""
    puzzles = await store.get_all_puzzles()
    return filter_puzzles_for_month(puzzles, query.year, query.month)


@router.post("/submit", response_model=SubmissionResult)
async def submit(
    body: SubmitAnswer,
    identity: User = Depends(require_identity),
    store: PuzzleStore = Depends(get_store),
):
    """Check an answer and record the attempt."""
    return await submit_answer(store, identity.id, body.puzzle_id, body.answer)


@router.get("/progress", response_model=list[ProgressResponse])
async def get_user_progress(
    query: Annotated[MonthQuery, Query()],
    identity: User = Depends(require_identity),
    store: PuzzleStore = Depends(get_store),
):
    """Caller's progress rows for one month."""
    return await store.get_user_progress_by_month(
        identity.id, query.year, query.month,
    )
