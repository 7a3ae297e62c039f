"""User Upsert Planning: tests for insert values and conflict-update fields.

Tests cover:
    - open_id required and non-blank
    - unset fields untouched, None/"" clears
    - role: explicit wins, owner forced to admin, otherwise column default
    - last_signed_in default on insert, forced on otherwise-empty update
"""

from datetime import datetime, timezone

import pytest

from daily_puzzle.core.domain_types import UserRole
from daily_puzzle.core.errors import InputValidationError
from daily_puzzle.core.user_upsert import plan_user_upsert

NOW = datetime(2025, 11, 1, 12, 0, tzinfo=timezone.utc)
OWNER = "owner-open-id"


@pytest.mark.parametrize("supplied", [{}, {"open_id": ""}, {"open_id": "   "}, {"open_id": None}])
def test_blank_open_id_raises_validation_error(supplied):
    with pytest.raises(InputValidationError) as exc_info:
        plan_user_upsert(supplied, OWNER, NOW)
    assert exc_info.value.field == "open_id"


def test_bare_login_inserts_timestamp_and_touches_last_signed_in():
    plan = plan_user_upsert({"open_id": "u1"}, OWNER, NOW)
    assert plan.values == {"open_id": "u1", "last_signed_in": NOW}
    assert plan.update_set == {"last_signed_in": NOW}


def test_supplied_fields_only_are_updated():
    plan = plan_user_upsert({"open_id": "u1", "name": "Ada"}, OWNER, NOW)
    assert plan.update_set == {"name": "Ada"}
    assert "email" not in plan.values
    assert "login_method" not in plan.values


@pytest.mark.parametrize("value", [None, ""])
def test_none_or_empty_clears_field(value):
    plan = plan_user_upsert({"open_id": "u1", "email": value}, OWNER, NOW)
    assert plan.values["email"] is None
    assert plan.update_set == {"email": None}


def test_explicit_last_signed_in_is_used():
    earlier = datetime(2024, 1, 1, tzinfo=timezone.utc)
    plan = plan_user_upsert({"open_id": "u1", "last_signed_in": earlier}, OWNER, NOW)
    assert plan.values["last_signed_in"] == earlier
    assert plan.update_set == {"last_signed_in": earlier}


def test_regular_user_role_left_to_default():
    plan = plan_user_upsert({"open_id": "u1", "name": "Ada"}, OWNER, NOW)
    assert "role" not in plan.values
    assert "role" not in plan.update_set


def test_owner_is_forced_to_admin():
    plan = plan_user_upsert({"open_id": OWNER}, OWNER, NOW)
    assert plan.values["role"] is UserRole.ADMIN
    assert plan.update_set == {"role": UserRole.ADMIN}


def test_explicit_role_wins_over_owner_rule():
    plan = plan_user_upsert({"open_id": OWNER, "role": "user"}, OWNER, NOW)
    assert plan.values["role"] is UserRole.USER
    assert plan.update_set["role"] is UserRole.USER


def test_no_owner_configured_never_forces_admin():
    plan = plan_user_upsert({"open_id": "u1"}, None, NOW)
    assert "role" not in plan.values
