"""Route Dependencies: store injection and the public/protected identity tiers.

Invariants:
    - get_store returns the PuzzleStore placed on app.state by create_app
    - get_identity never raises: anonymous callers resolve to None
    - require_identity raises UnauthorizedError when no identity resolved

Design Decisions:
    - Store read from app.state, not imported: tests build an app around their own store
    - require_identity depends on get_identity, so overriding get_identity in tests
      drives both tiers
"""

from fastapi import Depends, Request

from daily_puzzle.core.errors import UnauthorizedError
from daily_puzzle.models.user import User
from daily_puzzle.services.identity import resolve_identity
from daily_puzzle.services.puzzle_store import PuzzleStore


def get_store(request: Request) -> PuzzleStore:
    return request.app.state.store


async def get_identity(
    request: Request, store: PuzzleStore = Depends(get_store),
) -> User | None:
    """Public tier: the caller's user row, or None."""
    return await resolve_identity(request.session, store)


async def require_identity(
    identity: User | None = Depends(get_identity),
) -> User:
    """Protected tier: the caller's user row, or 401."""
    if identity is None:
        raise UnauthorizedError()
    return identity
