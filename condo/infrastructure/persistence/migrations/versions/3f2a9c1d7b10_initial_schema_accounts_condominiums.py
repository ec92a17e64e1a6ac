"""initial_schema_accounts_condominiums

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-19 09:12:44.218301

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema - account, condominium, account_condominium."""

    op.create_table(
        "account",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("refresh_token_hash", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_account_email"),
    )
    op.create_index("ix_account_deleted_at", "account", ["deleted_at"])

    op.create_table(
        "condominium",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=False),
        sa.Column("country", sa.String(length=100), nullable=False),
        sa.Column("postal_code", sa.String(length=20), nullable=True),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("website", sa.String(length=500), nullable=True),
        sa.Column("tax_id", sa.String(length=50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_condominium_deleted_at", "condominium", ["deleted_at"])

    op.create_table(
        "account_condominium",
        sa.Column("account_id", sa.String(), nullable=False),
        sa.Column("condominium_id", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(["account_id"], ["account.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["condominium_id"], ["condominium.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("account_id", "condominium_id"),
    )
    op.create_index(
        "ix_account_condominium_condominium_id",
        "account_condominium",
        ["condominium_id"],
    )


def downgrade() -> None:
    """Downgrade schema - drop all tables."""
    op.drop_index("ix_account_condominium_condominium_id", table_name="account_condominium")
    op.drop_table("account_condominium")
    op.drop_index("ix_condominium_deleted_at", table_name="condominium")
    op.drop_table("condominium")
    op.drop_index("ix_account_deleted_at", table_name="account")
    op.drop_table("account")
