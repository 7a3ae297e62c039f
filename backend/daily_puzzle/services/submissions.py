"""Answer Submission: checks an answer, records progress, masks reveal fields.

Invariants:
    - Unknown puzzle_id raises ResourceNotFoundError (never records progress)
    - Progress is recorded for every submission, correct or not
    - Reveal fields only populated on a correct answer (core/answers.py)
    - No store configured, or store unreachable, raises StoreUnavailableError;
      an outage never reads as an unknown puzzle

Design Decisions:
    - Impureim sandwich: fetch puzzle (IO) → pure check → record progress (IO)
"""

import logging

from daily_puzzle.core.answers import build_submission_result, is_correct_answer
from daily_puzzle.core.errors import (
    ErrorContext, ResourceNotFoundError, StoreUnavailableError,
)
from daily_puzzle.services.puzzle_store import PuzzleStore

logger = logging.getLogger(__name__)


async def submit_answer(
    store: PuzzleStore, user_id: int, puzzle_id: int, answer: str,
) -> dict:
    if not store.available:
        raise StoreUnavailableError(
            "submit", ErrorContext(user_id=user_id, puzzle_id=puzzle_id),
        )

    puzzle = await store.get_puzzle_by_id(puzzle_id, degrade=False)
    if puzzle is None:
        raise ResourceNotFoundError(
            "Puzzle", str(puzzle_id),
            ErrorContext(user_id=user_id, puzzle_id=puzzle_id),
        )

    correct = is_correct_answer(answer, puzzle.answer)
    await store.update_user_progress(user_id, puzzle.id, correct)

    logger.info(
        f"Answer submitted ({'correct' if correct else 'incorrect'})",
        extra={"user_id": user_id, "puzzle_id": puzzle.id},
    )
    return build_submission_result(puzzle, correct)
