"""Logging configuration for the accounts API process."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DRIVER_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg")


def configure_logging(*, level: str) -> int:
    """Configure root logging once and return the resolved numeric level.

    Database driver loggers stay at WARNING unless DEBUG is requested, so
    statement parameters never reach the log at normal levels.
    """

    normalized_level = level.strip().upper() if level.strip() else "INFO"
    resolved_level = getattr(logging, normalized_level, logging.INFO)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    logging.basicConfig(level=resolved_level, format=_LOG_FORMAT)

    driver_level = resolved_level if resolved_level <= logging.DEBUG else logging.WARNING
    for name in _DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)
    return resolved_level
