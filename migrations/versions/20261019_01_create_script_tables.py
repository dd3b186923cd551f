"""create scripts, user roles and user profiles

Revision ID: 3f9a1c27d4e8
Revises: 
Create Date: 2026-10-19 10:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9a1c27d4e8"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "scripts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
        sa.Column("deleted_at", sa.BigInteger(), nullable=True),
    )
    op.create_index("ix_scripts_category", "scripts", ["category"])
    op.create_index("ix_scripts_author", "scripts", ["author"])
    op.create_index("ix_scripts_deleted_at", "scripts", ["deleted_at"])

    op.create_table(
        "user_roles",
        sa.Column("identity", sa.String(length=255), primary_key=True),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="guest"),
    )

    op.create_table(
        "user_profiles",
        sa.Column("identity", sa.String(length=255), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("user_profiles")
    op.drop_table("user_roles")

    op.drop_index("ix_scripts_deleted_at", table_name="scripts")
    op.drop_index("ix_scripts_author", table_name="scripts")
    op.drop_index("ix_scripts_category", table_name="scripts")
    op.drop_table("scripts")
