"""Initial schema — pets, page_details, website_title.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

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
        "pets",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("image", sa.Text, nullable=True),
        sa.Column("adopted_by", sa.Text, nullable=True),
        sa.Column("adopter_ip", sa.Text, nullable=True, unique=True),
    )

    op.create_table(
        "page_details",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.Text, nullable=False, server_default=""),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
    )

    op.create_table(
        "website_title",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.Text, nullable=False, server_default=""),
    )


def downgrade() -> None:
    op.drop_table("website_title")
    op.drop_table("page_details")
    op.drop_table("pets")
