from __future__ import annotations

import logging

import pytest

from xpress_accounts.infrastructure.logging import configure_logging


@pytest.mark.parametrize(
    ("raw_level", "expected"),
    [("info", logging.INFO), (" WARNING ", logging.WARNING), ("", logging.INFO), ("nope", logging.INFO)],
)
def test_configure_logging_resolves_level_names(raw_level: str, expected: int) -> None:
    assert configure_logging(level=raw_level) == expected


def test_driver_loggers_stay_quiet_unless_debug() -> None:
    configure_logging(level="INFO")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    configure_logging(level="DEBUG")
    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG

    configure_logging(level="INFO")
