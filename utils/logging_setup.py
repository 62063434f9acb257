"""Centralized logging configuration.

``configure_logging(...)`` attaches a single ``StreamHandler`` to the
``budget_tracker`` root logger and is called once by ``main.py``.
``get_logger(name)`` hands out child loggers; until configuration runs the
root logger carries a ``NullHandler`` so library use stays silent.

Modules never attach their own handlers.
"""
import logging
import os
import sys
from typing import IO

ROOT_LOGGER_NAME = "budget_tracker"
LOG_LEVEL_ENV = "BUDGET_TRACKER_LOG_LEVEL"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV)
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the root app logger exactly once.

    ``level`` may be an int or a level name. When ``None`` the
    ``BUDGET_TRACKER_LOG_LEVEL`` environment variable is used, else INFO.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    numeric = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(numeric)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return ``budget_tracker.<name>``, installing a NullHandler if unconfigured."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _CONFIGURED and not root.handlers:
        root.addHandler(logging.NullHandler())
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
