"""API test fixtures: app built around the in-memory store, identity injectable.

Invariants:
    - Each test gets its own app from create_app (no module-level app reuse)
    - login_as overrides get_identity, which drives both public and protected tiers

Design Decisions:
    - httpx AsyncClient over ASGITransport: lifespan not run, store injected directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from daily_puzzle.api.dependencies import get_identity
from daily_puzzle.config import Settings
from daily_puzzle.main import create_app
from daily_puzzle.services.puzzle_store import PuzzleStore

UNREACHABLE_URL = "sqlite+aiosqlite:////nonexistent-dir/daily-puzzle/puzzles.db"


def _settings() -> Settings:
    return Settings(_env_file=None, database_url=None, session_secret="test-secret")


@pytest.fixture
def app(store):
    return create_app(_settings(), store)


@pytest.fixture
def app_without_store():
    return create_app(_settings(), PuzzleStore())


@pytest.fixture
async def app_unreachable_store():
    store = PuzzleStore(UNREACHABLE_URL)
    yield create_app(_settings(), store)
    await store.dispose()


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(app):
    async with _client(app) as c:
        yield c


@pytest.fixture
async def client_without_store(app_without_store):
    async with _client(app_without_store) as c:
        yield c


@pytest.fixture
async def client_unreachable_store(app_unreachable_store):
    async with _client(app_unreachable_store) as c:
        yield c


@pytest.fixture
def login_as(app):
    """Resolve every request on `app` to the given user row."""
    def _login(user):
        app.dependency_overrides[get_identity] = lambda: user

    yield _login
    app.dependency_overrides.clear()
