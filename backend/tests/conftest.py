"""Root conftest: in-memory store and seed data shared by all test packages.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The store under test wraps that engine through a real DatabaseSessionManager
    - Seed rows are inserted in a short-lived session and returned detached

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session
      sees the same database
    - DatabaseSessionManager built via __new__: reuses the test engine instead of
      creating one from a URL
"""

import os

os.environ.setdefault("SESSION_SECRET", "test-session-secret")

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from daily_puzzle.db.base import Base
from daily_puzzle.infrastructure.database import DatabaseSessionManager
from daily_puzzle.models import Puzzle, User
from daily_puzzle.services.puzzle_store import PuzzleStore

OWNER_OPEN_ID = "owner-open-id"

SEED_PUZZLES = [
    {
        "date": "2025-11-02",
        "question": "What has hands but cannot clap?",
        "type": "riddle",
        "answer": "clock",
        "location": "Big Ben, London",
        "latitude": "51.4975",
        "longitude": "-0.1357",
        "hint": "It tells you the time",
    },
    {
        "date": "2025-11-01",
        "question": (
            "I have cities but no houses, forests but no trees, "
            "and water but no fish. What am I?"
        ),
        "type": "riddle",
        "answer": "map",
        "location": "The Great Wall of China",
        "latitude": "40.4319",
        "longitude": "116.5704",
        "hint": "Think about something you use for navigation",
    },
    {
        "date": "2025-10-31",
        "question": "What has keys but can't open locks?",
        "type": "riddle",
        "answer": "piano",
        "location": "Sydney Opera House",
        "latitude": "-33.8568",
        "longitude": "151.2153",
        "hint": None,
    },
    {
        "date": "2025-11-03",
        "question": "What can travel around the world while staying in a corner?",
        "type": "riddle",
        "answer": "stamp",
        "location": "Statue of Liberty, New York",
        "latitude": "40.6892",
        "longitude": "-74.0445",
        "hint": "You put it on mail",
    },
    {
        "date": "2025-12-01",
        "question": "What gets wet while drying?",
        "type": "riddle",
        "answer": "towel",
        "location": "Machu Picchu, Peru",
        "latitude": None,
        "longitude": None,
        "hint": "You use it after a shower",
    },
]


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def session_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def store(session_manager):
    return PuzzleStore(owner_open_id=OWNER_OPEN_ID, manager=session_manager)


@pytest.fixture
async def seed_puzzles(test_session_factory) -> dict[str, Puzzle]:
    """Insert SEED_PUZZLES (deliberately out of date order), keyed by date."""
    async with test_session_factory() as db:
        puzzles = [Puzzle(**data) for data in SEED_PUZZLES]
        db.add_all(puzzles)
        await db.commit()
    return {p.date: p for p in puzzles}


@pytest.fixture
async def seed_users(test_session_factory) -> list[User]:
    async with test_session_factory() as db:
        users = [
            User(open_id="user-1", name="Test User 1", email="test1@example.com", login_method="test"),
            User(open_id="user-2", name="Test User 2", email="test2@example.com", login_method="test"),
        ]
        db.add_all(users)
        await db.commit()
    return users
