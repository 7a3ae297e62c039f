"""Answer Submission: correctness, progress recording and reveal masking end to end.

Invariants:
    - Exact answer (any casing/outer whitespace) → correct with reveal fields
    - Any other answer → incorrect, all reveal fields None
    - Every submission recorded; unknown puzzle records nothing
"""

import pytest

from daily_puzzle.core.errors import ResourceNotFoundError, StoreUnavailableError
from daily_puzzle.services.puzzle_store import PuzzleStore
from daily_puzzle.services.submissions import submit_answer


async def test_correct_answer_reveals_location(store, seed_users, seed_puzzles):
    user, puzzle = seed_users[0], seed_puzzles["2025-11-01"]
    result = await submit_answer(store, user.id, puzzle.id, "  MAP  ")
    assert result == {
        "correct": True,
        "location": "The Great Wall of China",
        "latitude": "40.4319",
        "longitude": "116.5704",
    }


async def test_wrong_then_progress_reflects_latest(store, seed_users, seed_puzzles):
    user, puzzle = seed_users[0], seed_puzzles["2025-11-01"]
    await submit_answer(store, user.id, puzzle.id, "  MAP  ")
    result = await submit_answer(store, user.id, puzzle.id, "wrong")

    assert result == {
        "correct": False, "location": None, "latitude": None, "longitude": None,
    }
    progress = await store.get_user_progress(user.id, puzzle.id)
    assert progress.attempts == 2
    assert progress.solved == 0
    assert progress.solved_at is None


async def test_unknown_puzzle_raises_not_found(store, seed_users, seed_puzzles):
    with pytest.raises(ResourceNotFoundError):
        await submit_answer(store, seed_users[0].id, 9999, "map")
    assert await store.get_user_progress_by_month(seed_users[0].id, 2025, 11) == []


async def test_submission_without_store_raises():
    with pytest.raises(StoreUnavailableError):
        await submit_answer(PuzzleStore(), 1, 1, "map")


async def test_submission_with_unreachable_store_raises():
    store = PuzzleStore("sqlite+aiosqlite:////nonexistent-dir/daily-puzzle/puzzles.db")
    try:
        with pytest.raises(StoreUnavailableError):
            await submit_answer(store, 1, 1, "map")
    finally:
        await store.dispose()
