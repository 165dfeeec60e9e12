from __future__ import annotations

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.config import Config

from alembic import command


def _table_names(db_path: Path) -> set[str]:
    engine = sa.create_engine(f"sqlite+pysqlite:///{db_path}")
    try:
        return set(sa.inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_upgrade_head_accepts_async_driver_url(tmp_path: Path) -> None:
    db_path = tmp_path / "async_driver.db"
    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")

    command.upgrade(alembic_config, "head")

    assert {"taxis", "user_accounts", "alembic_version"} <= _table_names(db_path)


def test_upgrade_head_uses_database_url_when_ini_url_is_placeholder(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    db_path = tmp_path / "from_env.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")

    command.upgrade(Config("alembic.ini"), "head")

    assert {"taxis", "user_accounts"} <= _table_names(db_path)
