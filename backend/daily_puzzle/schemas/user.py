"""User Schemas: login upsert input and identity response.

Invariants:
    - UserUpsert distinguishes "not supplied" (unset) from "clear" (None);
      callers dump with exclude_unset=True
    - UserResponse is the identity returned by auth.me

Design Decisions:
    - open_id has no min_length here: the blank check lives in
      core/user_upsert.py so it raises the domain InputValidationError
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from daily_puzzle.core.domain_types import UserRole


class UserUpsert(BaseModel):
    """Profile data reported by the identity provider at login."""
    open_id: str = Field(max_length=64)
    name: str | None = None
    email: str | None = Field(None, max_length=320)
    login_method: str | None = Field(None, max_length=64)
    role: UserRole | None = None
    last_signed_in: datetime | None = None


class UserResponse(BaseModel):
    """Resolved caller identity."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    open_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None
    role: UserRole
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime


class LogoutResponse(BaseModel):
    success: bool = True
