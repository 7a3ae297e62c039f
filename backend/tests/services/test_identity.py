"""Identity: session-bound sign in, resolution and sign out."""

from daily_puzzle.core.domain_types import UserRole
from daily_puzzle.schemas.user import UserUpsert
from daily_puzzle.services.identity import (
    SESSION_OPEN_ID_KEY, resolve_identity, sign_in, sign_out,
)


async def test_anonymous_session_resolves_to_none(store):
    assert await resolve_identity({}, store) is None


async def test_sign_in_binds_session_and_upserts(store):
    session: dict = {}
    user = await sign_in(session, store, UserUpsert(open_id="u1", name="Ada", login_method="google"))

    assert session[SESSION_OPEN_ID_KEY] == "u1"
    resolved = await resolve_identity(session, store)
    assert resolved.id == user.id
    assert resolved.name == "Ada"
    assert resolved.role is UserRole.USER


async def test_unknown_open_id_resolves_to_none(store, seed_users):
    assert await resolve_identity({SESSION_OPEN_ID_KEY: "unknown-open-id"}, store) is None


def test_sign_out_clears_session():
    session = {SESSION_OPEN_ID_KEY: "u1", "other": 1}
    sign_out(session)
    assert session == {}


async def test_sign_in_strips_open_id_before_binding(store):
    session: dict = {}
    user = await sign_in(session, store, UserUpsert(open_id="  padded-id  "))

    assert session[SESSION_OPEN_ID_KEY] == "padded-id"
    resolved = await resolve_identity(session, store)
    assert resolved.id == user.id
