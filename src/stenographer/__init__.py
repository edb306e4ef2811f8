"""Structured logging with console, JSON-array file and database sinks."""

from __future__ import annotations

__version__ = "0.3.0"

from .config import StenographerConfig, resolve_config
from .core import (
    ClosedSinkError,
    ConfigurationError,
    FormattingError,
    InvalidLevelError,
    LogEntry,
    LogLevel,
    SinkIOError,
    StenographerError,
    serialize_error,
)
from .core.sinks import ConsoleFormatter, SqlTableWriter, TableWriter, colorama_styler
from .logger import Stenographer
from .reader import iter_log_entries, read_log_file

__all__ = [
    "ClosedSinkError",
    "ConfigurationError",
    "ConsoleFormatter",
    "FormattingError",
    "InvalidLevelError",
    "LogEntry",
    "LogLevel",
    "SinkIOError",
    "SqlTableWriter",
    "Stenographer",
    "StenographerConfig",
    "StenographerError",
    "TableWriter",
    "colorama_styler",
    "iter_log_entries",
    "read_log_file",
    "resolve_config",
    "serialize_error",
]
