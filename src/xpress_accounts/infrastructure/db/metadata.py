"""SQLAlchemy metadata definitions for account and taxi tables."""

from __future__ import annotations

import sqlalchemy as sa

metadata = sa.MetaData()

taxis = sa.Table(
    "taxis",
    metadata,
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

user_accounts = sa.Table(
    "user_accounts",
    metadata,
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
