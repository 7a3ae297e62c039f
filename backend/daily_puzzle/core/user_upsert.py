"""User Upsert Planning: decides insert values and conflict-update fields for a login.

Invariants:
    - open_id is required and non-blank (InputValidationError otherwise)
    - Only fields the caller supplied are written on update; absent fields are untouched
    - Supplied None or "" clears a text field
    - Explicit role wins; otherwise the owner identifier is forced to admin;
      otherwise role is left to the column default
    - Insert always carries last_signed_in; an otherwise-empty update touches last_signed_in
    - Pure: `now` and `owner_open_id` are passed in, no clock or settings access

Design Decisions:
    - Input is the exclude_unset dump of the pydantic model: "key missing" is the
      only way to say "not touched", so None can mean "clear"
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from daily_puzzle.core.domain_types import UserRole
from daily_puzzle.core.errors import InputValidationError

TEXT_FIELDS = ("name", "email", "login_method")


@dataclass
class UserUpsertPlan:
    """Column values for the insert path and the conflict-update path."""
    values: dict[str, Any] = field(default_factory=dict)
    update_set: dict[str, Any] = field(default_factory=dict)


def plan_user_upsert(
    supplied: dict[str, Any], owner_open_id: str | None, now: datetime,
) -> UserUpsertPlan:
    open_id = (supplied.get("open_id") or "").strip()
    if not open_id:
        raise InputValidationError("User open_id is required for upsert", "open_id")

    plan = UserUpsertPlan(values={"open_id": open_id})

    for name in TEXT_FIELDS:
        if name not in supplied:
            continue
        value = supplied[name] or None
        plan.values[name] = value
        plan.update_set[name] = value

    if supplied.get("last_signed_in") is not None:
        plan.values["last_signed_in"] = supplied["last_signed_in"]
        plan.update_set["last_signed_in"] = supplied["last_signed_in"]

    role = supplied.get("role")
    if role is not None:
        plan.values["role"] = UserRole(role)
        plan.update_set["role"] = UserRole(role)
    elif owner_open_id and open_id == owner_open_id:
        plan.values["role"] = UserRole.ADMIN
        plan.update_set["role"] = UserRole.ADMIN

    plan.values.setdefault("last_signed_in", now)

    if not plan.update_set:
        plan.update_set["last_signed_in"] = now

    return plan
