"""Puzzle Schemas: typed request/response contracts for the puzzle operations.

Invariants:
    - MonthQuery.month is 1..12, year is 1..9999
    - SubmitAnswer.puzzle_id >= 1, answer at most 255 chars
    - PuzzleResponse NEVER carries answer, location, latitude or longitude
    - SubmissionResult reveal fields are None unless correct (set by core/answers.py)

Design Decisions:
    - from_attributes on response models: ORM rows validated directly
    - solved exposed as bool even though stored as 0/1
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MonthQuery(BaseModel):
    """Year/month selector for month listings and progress."""
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)


class SubmitAnswer(BaseModel):
    """Answer submission for one puzzle."""
    puzzle_id: int = Field(ge=1)
    answer: str = Field(max_length=255)


class PuzzleResponse(BaseModel):
    """Public view of a puzzle: secret fields omitted."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: str
    question: str
    type: str
    hint: str | None = None


class SubmissionResult(BaseModel):
    """Outcome of a submission; location data only on a correct answer."""
    correct: bool
    location: str | None = None
    latitude: str | None = None
    longitude: str | None = None


class ProgressResponse(BaseModel):
    """One user's submission state on one puzzle."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    puzzle_id: int
    solved: bool
    solved_at: datetime | None = None
    attempts: int
    created_at: datetime
    updated_at: datetime
