"""Severity levels and the level gate."""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidLevelError

_ALIASES = {"WARN": "WARNING"}


class LogLevel(IntEnum):
    """Minimum-severity setting; a higher value is more verbose."""

    OFF = -1
    ERROR = 0
    WARNING = 1
    INFO = 2


def should_emit(configured: LogLevel, call_level: LogLevel) -> bool:
    """Return True when a call at ``call_level`` passes the configured minimum."""
    return configured >= call_level


def parse_level(value: object) -> LogLevel:
    """Coerce a LogLevel, its integer value or its (case-insensitive) name."""
    if isinstance(value, LogLevel):
        return value
    # bool is an int subclass; True/False are never a level.
    if isinstance(value, bool):
        raise InvalidLevelError(f"Invalid log level: {value!r}")
    if isinstance(value, int):
        try:
            return LogLevel(value)
        except ValueError as e:
            raise InvalidLevelError(f"Invalid log level: {value!r}") from e
    if isinstance(value, str):
        name = value.strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return LogLevel[name]
        except KeyError as e:
            valid = ", ".join(level.name for level in LogLevel)
            raise InvalidLevelError(
                f"Invalid log level {value!r}. Valid values: {valid}"
            ) from e
    raise InvalidLevelError(f"Invalid log level: {value!r}")
