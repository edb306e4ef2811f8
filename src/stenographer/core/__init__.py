"""Core logging pipeline: levels, entries, context, sinks and dispatch."""

from __future__ import annotations

from .context import ContextStore
from .dispatch import SinkDispatcher
from .entry import build_entry, format_timestamp, identity_format
from .errors import (
    ClosedSinkError,
    ConfigurationError,
    FormattingError,
    InvalidLevelError,
    SinkIOError,
    StenographerError,
)
from .levels import LogLevel, parse_level, should_emit
from .models import LogEntry
from .serialize import serialize_error, to_jsonable

__all__ = [
    "ClosedSinkError",
    "ConfigurationError",
    "ContextStore",
    "FormattingError",
    "InvalidLevelError",
    "LogEntry",
    "LogLevel",
    "SinkDispatcher",
    "SinkIOError",
    "StenographerError",
    "build_entry",
    "format_timestamp",
    "identity_format",
    "parse_level",
    "serialize_error",
    "should_emit",
    "to_jsonable",
]
