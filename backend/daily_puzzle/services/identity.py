"""Identity: resolves the caller from the signed session cookie.

Invariants:
    - The session holds only the caller's open_id; the user row is re-fetched per request
    - The session stores open_id exactly as upsert_user persisted it (outer whitespace stripped)
    - Unknown open_id or unavailable store resolves to None (anonymous), never an error
    - sign_out clears the whole session; SessionMiddleware then expires the cookie

Design Decisions:
    - Starlette SessionMiddleware (itsdangerous-signed cookie) over a custom JWT:
      the OAuth callback only needs to call sign_in()
"""

import logging

from daily_puzzle.models.user import User
from daily_puzzle.schemas.user import UserUpsert
from daily_puzzle.services.puzzle_store import PuzzleStore

logger = logging.getLogger(__name__)

SESSION_OPEN_ID_KEY = "open_id"


async def resolve_identity(session: dict, store: PuzzleStore) -> User | None:
    open_id = session.get(SESSION_OPEN_ID_KEY)
    if not open_id:
        return None
    return await store.get_user_by_open_id(open_id)


async def sign_in(
    session: dict, store: PuzzleStore, profile: UserUpsert,
) -> User | None:
    """Upsert the user reported by the identity provider and bind it to the session.

    Called by the OAuth callback once the provider has verified the user.
    """
    user = await store.upsert_user(profile)
    open_id = profile.open_id.strip()
    session[SESSION_OPEN_ID_KEY] = open_id
    logger.info("User signed in", extra={"open_id": open_id})
    return user


def sign_out(session: dict) -> None:
    session.clear()
