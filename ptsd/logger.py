"""Logging set-up for the framework, built on the standard logging module."""

from __future__ import annotations

import logging
from enum import Enum

LOGGER_NAME = "ptsd"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Level(Enum):
    """Logging levels, ordered from most to least verbose."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    @property
    def logging_level(self) -> int:
        """The matching level number of the standard logging module."""
        return _TO_LOGGING[self]


_TO_LOGGING = {
    Level.TRACE: TRACE,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.CRITICAL: logging.CRITICAL,
}

_TAGS = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.level_tag = _TAGS.get(record.levelno, record.levelname.lower())
        return super().format(record)


_HANDLER = logging.StreamHandler()
_HANDLER.setFormatter(_Formatter("%(name)s [%(level_tag)s] %(message)s"))


def _logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def init() -> None:
    """Attach the console sink and apply the default level."""
    from .config import DEFAULT_LOG_LEVEL

    logger = _logger()
    if _HANDLER not in logger.handlers:
        logger.addHandler(_HANDLER)
    logger.propagate = False
    set_level(DEFAULT_LOG_LEVEL)


def set_level(level: Level) -> None:
    """Omit every message below ``level``."""
    _logger().setLevel(level.logging_level)


def get_level() -> Level:
    """Return the level currently in force."""
    current = _logger().level
    for level in reversed(Level):
        if level.logging_level <= current:
            return level
    return Level.TRACE