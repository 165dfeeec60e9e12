"""Initial schema for taxis and user accounts."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_accounts_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "taxis",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("number", sa.Text(), nullable=False),
        sa.Column("max_place", sa.Integer(), nullable=False),
        sa.Column("available_place", sa.Integer(), nullable=False),
        sa.Column("current_station", sa.Uuid(), nullable=False),
        sa.Column("destination_station", sa.Uuid(), nullable=False),
        sa.UniqueConstraint("number", name="uq_taxis_number"),
        sa.CheckConstraint("max_place > 0", name="ck_taxis_max_place_positive"),
        sa.CheckConstraint(
            "available_place >= 0 AND available_place <= max_place",
            name="ck_taxis_available_place_range",
        ),
    )

    op.create_table(
        "user_accounts",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("taxi_id", sa.Uuid(), sa.ForeignKey("taxis.id"), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.UniqueConstraint("taxi_id", name="uq_user_accounts_taxi_id"),
    )


def downgrade() -> None:
    op.drop_table("user_accounts")
    op.drop_table("taxis")
