"""User ORM: persists authenticated users keyed by their OAuth identifier.

Invariants:
    - open_id is unique, non-nullable, and never updated after insert
    - role is 'user' or 'admin' (default 'user')
    - created_at/updated_at/last_signed_in auto-managed
    - Never deleted by the application

Design Decisions:
    - camelCase column names: schema shared with the existing database
    - native_enum=False: role stored as VARCHAR on every dialect (no CREATE TYPE)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column

from daily_puzzle.core.domain_types import UserRole
from daily_puzzle.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Authenticated caller identity."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    open_id: Mapped[str] = mapped_column(
        "openId", String(64), nullable=False, unique=True,
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    login_method: Mapped[str | None] = mapped_column(
        "loginMethod", String(64), nullable=True,
    )
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole, name="user_role", native_enum=False, length=10,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=UserRole.USER,
    )
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
    last_signed_in: Mapped[datetime] = mapped_column(
        "lastSignedIn", DateTime(timezone=True), nullable=False, default=_utcnow,
    )
