"""Alembic environment for the account schema.

The target URL comes from `sqlalchemy.url` when a caller set one explicitly,
otherwise from `DATABASE_URL` (process environment or the project `.env`).
Async driver URLs (`sqlite+aiosqlite`, `postgresql+asyncpg`) are migrated
through an async engine so the same value the API uses also works here.
"""

from __future__ import annotations

import asyncio
import os
from logging.config import fileConfig
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import URL, Connection, make_url
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context
from xpress_accounts.infrastructure.db.metadata import metadata

_PLACEHOLDER_URL = "sqlite:///./xpress_accounts.db"
_PROJECT_ROOT = Path(__file__).resolve().parents[1]

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def _resolve_url() -> URL:
    configured = config.get_main_option("sqlalchemy.url")
    if configured and configured != _PLACEHOLDER_URL:
        return make_url(configured)

    load_dotenv(_PROJECT_ROOT / ".env")
    return make_url(os.getenv("DATABASE_URL") or _PLACEHOLDER_URL)


def _configure(url: URL, **options: Any) -> None:
    # SQLite cannot ALTER most constraints in place; batch mode rebuilds tables.
    context.configure(
        target_metadata=metadata,
        compare_type=True,
        render_as_batch=url.get_backend_name() == "sqlite",
        **options,
    )


def _migrate(connection: Connection, url: URL) -> None:
    _configure(url, connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_async(url: URL) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate, url)
    finally:
        await engine.dispose()


def run_migrations_offline(url: URL) -> None:
    """Emit migration SQL without a database connection."""

    _configure(
        url,
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online(url: URL) -> None:
    """Apply migrations over a live connection, sync or async by driver."""

    if url.get_dialect().is_async:
        asyncio.run(_migrate_async(url))
        return

    engine = create_engine(url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            _migrate(connection, url)
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline(_resolve_url())
else:
    run_migrations_online(_resolve_url())
