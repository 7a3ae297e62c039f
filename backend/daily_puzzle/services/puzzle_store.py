"""Puzzle Store: data access for users, puzzles and per-user progress.

Invariants:
    - Every operation acquires the session manager first; when none is available
      reads return None/[] and writes are skipped, each logging a warning
    - Reads that hit StoreUnavailableError (unreachable DB) degrade the same way
    - upsert_user re-raises store failures after logging: a lost login is not silent
    - upsert_user is a single INSERT ... ON CONFLICT (openId) DO UPDATE: concurrent
      first logins for the same open_id both succeed on one row
    - update_user_progress: attempts += 1 per call; solved/solved_at from THIS call only
    - get_user_progress_by_month only returns rows of the given user_id

Design Decisions:
    - Explicit store value (no global): constructed once by create_app, disposed by lifespan
    - Lazy engine creation: a failed build is retried on the next access
    - Progress update is find-then-write in one session, no row lock: concurrent
      submissions for the same pair are last-write-wins (accepted for the domain)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from daily_puzzle.core.errors import DatabaseError, StoreUnavailableError
from daily_puzzle.core.month_range import month_date_range
from daily_puzzle.core.user_upsert import plan_user_upsert
from daily_puzzle.infrastructure.database import (
    DatabaseSessionManager, build_session_manager,
)
from daily_puzzle.models.puzzle import Puzzle
from daily_puzzle.models.user import User
from daily_puzzle.models.user_progress import UserProgress
from daily_puzzle.schemas.user import UserUpsert

logger = logging.getLogger(__name__)

T = TypeVar("T")

UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _dialect_insert(dialect_name: str):
    """INSERT construct supporting ON CONFLICT DO UPDATE for the dialect."""
    try:
        return UPSERT_INSERTS[dialect_name]
    except KeyError:
        raise DatabaseError(
            f"no upsert support for dialect '{dialect_name}'", "upsert",
        ) from None


class PuzzleStore:
    """CRUD and upsert operations over users, puzzles and userProgress."""

    def __init__(
        self,
        database_url: str | None = None,
        *,
        owner_open_id: str | None = None,
        pool_size: int = 20,
        max_overflow: int = 10,
        manager: DatabaseSessionManager | None = None,
    ):
        self._database_url = database_url
        self._owner_open_id = owner_open_id
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._manager = manager

    def _acquire(self) -> DatabaseSessionManager | None:
        if self._manager is None and self._database_url:
            self._manager = build_session_manager(
                self._database_url,
                pool_size=self._pool_size,
                max_overflow=self._max_overflow,
            )
        return self._manager

    @property
    def available(self) -> bool:
        return self._acquire() is not None

    async def dispose(self) -> None:
        if self._manager is not None:
            await self._manager.dispose()
            self._manager = None

    async def health_check(self) -> bool:
        manager = self._acquire()
        return await manager.health_check() if manager else False

    async def _read(
        self,
        what: str,
        query: Callable[[AsyncSession], Awaitable[T]],
        default: T,
    ) -> T:
        manager = self._acquire()
        if manager is None:
            logger.warning(f"[Database] Cannot get {what}: database not available")
            return default
        try:
            async with manager.session() as db:
                return await query(db)
        except StoreUnavailableError:
            logger.warning(f"[Database] Cannot get {what}: database unreachable")
            return default

    # ─── Users ───────────────────────────────────────────────────

    async def upsert_user(self, user: UserUpsert) -> User | None:
        """Insert or update a user keyed on open_id.

        Only fields set on ``user`` are written on update. Raises
        InputValidationError for a blank open_id and re-raises store failures.
        """
        now = datetime.now(timezone.utc)
        plan = plan_user_upsert(
            user.model_dump(exclude_unset=True), self._owner_open_id, now,
        )

        manager = self._acquire()
        if manager is None:
            logger.warning("[Database] Cannot upsert user: database not available")
            return None

        columns = User.__mapper__.columns
        values = {columns[k]: v for k, v in plan.values.items()}
        update_set = {columns[k]: v for k, v in plan.update_set.items()}
        update_set[columns["updated_at"]] = now

        try:
            async with manager.session() as db:
                insert = _dialect_insert(db.bind.dialect.name)
                stmt = insert(User.__table__).values(values).on_conflict_do_update(
                    index_elements=[columns["open_id"]], set_=update_set,
                )
                await db.execute(stmt)
                await db.commit()
                result = await db.execute(
                    select(User).where(User.open_id == plan.values["open_id"]).limit(1),
                )
                return result.scalar_one()
        except DatabaseError:
            logger.error(
                "[Database] Failed to upsert user",
                extra={"open_id": plan.values["open_id"]},
            )
            raise

    async def get_user_by_open_id(self, open_id: str) -> User | None:
        async def _query(db: AsyncSession) -> User | None:
            result = await db.execute(
                select(User).where(User.open_id == open_id).limit(1),
            )
            return result.scalar_one_or_none()

        return await self._read("user", _query, None)

    # ─── Puzzles ─────────────────────────────────────────────────

    async def get_puzzle_by_date(self, date: str) -> Puzzle | None:
        async def _query(db: AsyncSession) -> Puzzle | None:
            result = await db.execute(
                select(Puzzle).where(Puzzle.date == date).limit(1),
            )
            return result.scalar_one_or_none()

        return await self._read("puzzle", _query, None)

    async def get_puzzle_by_id(
        self, puzzle_id: int, *, degrade: bool = True,
    ) -> Puzzle | None:
        """Puzzle by id, or None.

        With ``degrade=False`` an unconfigured or unreachable store raises
        StoreUnavailableError instead of reading as "no such puzzle".
        """
        async def _query(db: AsyncSession) -> Puzzle | None:
            result = await db.execute(
                select(Puzzle).where(Puzzle.id == puzzle_id).limit(1),
            )
            return result.scalar_one_or_none()

        if degrade:
            return await self._read("puzzle", _query, None)

        manager = self._acquire()
        if manager is None:
            raise StoreUnavailableError("get puzzle")
        async with manager.session() as db:
            return await _query(db)

    async def get_all_puzzles(self) -> list[Puzzle]:
        """All puzzles, ascending by date."""
        async def _query(db: AsyncSession) -> list[Puzzle]:
            result = await db.execute(select(Puzzle).order_by(Puzzle.date))
            return list(result.scalars().all())

        return await self._read("puzzles", _query, [])

    # ─── Progress ────────────────────────────────────────────────

    async def get_user_progress(
        self, user_id: int, puzzle_id: int,
    ) -> UserProgress | None:
        async def _query(db: AsyncSession) -> UserProgress | None:
            return await self._find_progress(db, user_id, puzzle_id)

        return await self._read("progress", _query, None)

    async def get_user_progress_by_month(
        self, user_id: int, year: int, month: int,
    ) -> list[UserProgress]:
        """Progress rows of ``user_id`` whose puzzle date falls in the month."""
        start_date, end_date = month_date_range(year, month)

        async def _query(db: AsyncSession) -> list[UserProgress]:
            result = await db.execute(
                select(UserProgress)
                .join(Puzzle, UserProgress.puzzle_id == Puzzle.id)
                .where(UserProgress.user_id == user_id)
                .where(Puzzle.date >= start_date)
                .where(Puzzle.date <= end_date)
                .order_by(Puzzle.date)
            )
            return list(result.scalars().all())

        return await self._read("progress", _query, [])

    async def update_user_progress(
        self, user_id: int, puzzle_id: int, solved: bool,
    ) -> None:
        """Record one submission: attempts += 1, outcome overwritten."""
        manager = self._acquire()
        if manager is None:
            logger.warning("[Database] Cannot update progress: database not available")
            return

        now = datetime.now(timezone.utc)
        outcome: dict[str, Any] = {
            "solved": 1 if solved else 0,
            "solved_at": now if solved else None,
        }
        async with manager.session() as db:
            existing = await self._find_progress(db, user_id, puzzle_id)
            if existing is not None:
                existing.solved = outcome["solved"]
                existing.solved_at = outcome["solved_at"]
                existing.attempts = existing.attempts + 1
                existing.updated_at = now
            else:
                db.add(UserProgress(
                    user_id=user_id, puzzle_id=puzzle_id, attempts=1, **outcome,
                ))
            await db.commit()

        logger.info(
            "Progress recorded",
            extra={"user_id": user_id, "puzzle_id": puzzle_id},
        )

    @staticmethod
    async def _find_progress(
        db: AsyncSession, user_id: int, puzzle_id: int,
    ) -> UserProgress | None:
        result = await db.execute(
            select(UserProgress)
            .where(UserProgress.user_id == user_id)
            .where(UserProgress.puzzle_id == puzzle_id)
            .limit(1)
        )
        return result.scalar_one_or_none()
