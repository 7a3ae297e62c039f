"""Initial schema: users, puzzles, userProgress.

Revision ID: 001_initial
Revises: None
Create Date: 2025-10-28

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("openId", sa.String(64), nullable=False, unique=True),
        sa.Column("name", sa.Text, nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("loginMethod", sa.String(64), nullable=True),
        sa.Column("role", sa.String(10), nullable=False, server_default="user"),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("lastSignedIn", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "puzzles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.String(10), nullable=False, unique=True),
        sa.Column("question", sa.Text, nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("answer", sa.String(255), nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("latitude", sa.String(20), nullable=True),
        sa.Column("longitude", sa.String(20), nullable=True),
        sa.Column("hint", sa.Text, nullable=True),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "userProgress",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("userId", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("puzzleId", sa.Integer, sa.ForeignKey("puzzles.id"), nullable=False),
        sa.Column("solved", sa.Integer, nullable=False, server_default="0"),
        sa.Column("solvedAt", sa.DateTime(timezone=True), nullable=True),
        sa.Column("attempts", sa.Integer, nullable=False, server_default="0"),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("userId", "puzzleId", name="uq_user_progress_user_puzzle"),
    )


def downgrade() -> None:
    op.drop_table("userProgress")
    op.drop_table("puzzles")
    op.drop_table("users")
