"""Log sinks: console, JSON-array file and database table."""

from __future__ import annotations

from .base import Sink
from .console import ConsoleFormatter, ConsoleSink, colorama_styler, plain_styler
from .database import DatabaseSink, SqlTableWriter, TableWriter, as_table_writer
from .json_file import FileSinkState, JsonFileSink

__all__ = [
    "ConsoleFormatter",
    "ConsoleSink",
    "DatabaseSink",
    "FileSinkState",
    "JsonFileSink",
    "Sink",
    "SqlTableWriter",
    "TableWriter",
    "as_table_writer",
    "colorama_styler",
    "plain_styler",
]
