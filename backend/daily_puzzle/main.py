"""Daily Puzzle API: FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DailyPuzzleError → structured JSON responses
    - CORS and session cookie configured from settings (not hardcoded)
    - One PuzzleStore per app: built by create_app, exposed on app.state,
      disposed on shutdown by the lifespan

Design Decisions:
    - Factory over module-level wiring: tests build an app around an in-memory store
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store engine built lazily: the API boots without DATABASE_URL and serves empty reads
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from daily_puzzle.api.error_handlers import register_error_handlers
from daily_puzzle.api.routes import auth, health, puzzles
from daily_puzzle.config import Settings, get_settings
from daily_puzzle.infrastructure.observability import setup_logging
from daily_puzzle.services.puzzle_store import PuzzleStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if not settings.database_url:
        logger.warning("DATABASE_URL not set: puzzle reads will be empty")
    logger.info("Daily Puzzle API started")
    yield
    await app.state.store.dispose()
    logger.info("Daily Puzzle API shutting down")


def create_app(
    settings: Settings | None = None, store: PuzzleStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    store = store or PuzzleStore(
        settings.database_url,
        owner_open_id=settings.owner_open_id,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )

    app = FastAPI(title="Daily Puzzle API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age_seconds,
        https_only=settings.cookie_secure,
        same_site=settings.cookie_samesite,
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(puzzles.router)

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("daily_puzzle.main:app", host="127.0.0.1", port=3000, reload=True)
