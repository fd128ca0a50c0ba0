"""Add admin_sessions table for token-based admin login.

Revision ID: 002_admin_sessions
Revises: 001_initial
Create Date: 2026-10-19

Stores sha256 digests of issued admin tokens with their expiry.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "002_admin_sessions"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "admin_sessions",
        sa.Column("token_hash", sa.String(64), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_admin_sessions_expires_at", "admin_sessions", ["expires_at"],
    )


def downgrade() -> None:
    op.drop_index("ix_admin_sessions_expires_at", table_name="admin_sessions")
    op.drop_table("admin_sessions")
