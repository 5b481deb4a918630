"""Log levels and the named processes that emit log records."""

from __future__ import annotations

import enum


class LogLevel(enum.IntEnum):
    """Severity of a log record, from least to most critical."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    PYTHON = 3
    ERROR = 4
    FATAL = 5


class Process(enum.Enum):
    """Processes that can own a logger; the value is the name shown in headers."""

    DEV_HANDLER = "DEV_HANDLER"
    EXECUTOR = "EXECUTOR"
    NET_HANDLER = "NET_HANDLER"
    SHM = "SHM"
    TEST = "TEST"
    NETWORK_SWITCH = "NETWORK_SWITCH"


# PYTHON is deliberately absent: it is a record level, not a configurable threshold.
_CONFIGURABLE = {
    level.name: level
    for level in (LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL)
}


def parse_level(text: str) -> LogLevel | None:
    """Return the threshold level named by ``text``, or None if it names none."""
    return _CONFIGURABLE.get(text.strip())