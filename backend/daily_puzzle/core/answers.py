"""Answer Checking: pure normalization, comparison and reveal masking.

Invariants:
    - Correctness is equality after lower-casing and trimming outer whitespace
    - Reveal fields (location, latitude, longitude) are None unless the answer is correct
    - Pure functions: no IO, no state mutation

Design Decisions:
    - Masking lives here, not in the route or the response schema
"""

from daily_puzzle.core.repository_protocols import PuzzleLike


def normalize_answer(text: str) -> str:
    return text.strip().lower()


def is_correct_answer(submitted: str, expected: str) -> bool:
    """Case-insensitive, whitespace-trimmed equality."""
    return normalize_answer(submitted) == normalize_answer(expected)


def build_submission_result(puzzle: PuzzleLike, correct: bool) -> dict:
    """Submission outcome with reveal fields populated only on a correct answer."""
    return {
        "correct": correct,
        "location": puzzle.location if correct else None,
        "latitude": puzzle.latitude if correct else None,
        "longitude": puzzle.longitude if correct else None,
    }
