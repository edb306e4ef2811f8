"""Relational table sink.

The connection is borrowed from the caller: the sink creates its table and
inserts rows but never closes the connection.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..errors import ConfigurationError
from ..models import ROW_FIELDS, LogEntry

LOGGER = logging.getLogger(__name__)

DEFAULT_TABLE_NAME = "LOGS"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS {table} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    datetime TEXT,
    level TEXT,
    context TEXT,
    msg TEXT,
    data TEXT,
    error TEXT
)
"""


@runtime_checkable
class TableWriter(Protocol):
    """Table-write capability consumed by DatabaseSink."""

    def ensure_table(self, table_name: str) -> None:
        """Create the log table if it does not exist (idempotent)."""
        ...

    def write_row(self, table_name: str, row: Mapping[str, str | None]) -> None:
        """Append one row."""
        ...


def validate_table_name(table_name: str) -> str:
    """Table names are interpolated into SQL, so only plain identifiers pass."""
    if not isinstance(table_name, str) or not _IDENTIFIER_RE.match(table_name):
        raise ConfigurationError(
            f"table_name must be a plain SQL identifier, got {table_name!r}"
        )
    return table_name


class SqlTableWriter:
    """TableWriter over a DB-API 2.0 connection using qmark parameters (sqlite3)."""

    def __init__(self, conn: Any):
        self.conn = conn

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> None:
        cur = self.conn.cursor()
        try:
            cur.execute(sql, params)
        finally:
            cur.close()
        self.conn.commit()

    def ensure_table(self, table_name: str) -> None:
        table = validate_table_name(table_name)
        self._execute(_CREATE_TABLE_SQL.format(table=table))

    def write_row(self, table_name: str, row: Mapping[str, str | None]) -> None:
        table = validate_table_name(table_name)
        columns = ", ".join(ROW_FIELDS)
        placeholders = ", ".join("?" for _ in ROW_FIELDS)
        self._execute(
            f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
            tuple(row.get(name) for name in ROW_FIELDS),
        )


def as_table_writer(db_conn: Any) -> TableWriter:
    """Use ``db_conn`` directly if it already is a TableWriter, else wrap it."""
    if isinstance(db_conn, TableWriter):
        return db_conn
    if not callable(getattr(db_conn, "cursor", None)) or not callable(
        getattr(db_conn, "commit", None)
    ):
        raise ConfigurationError(
            "db_conn must be a DB-API connection (cursor/commit) or a TableWriter"
        )
    return SqlTableWriter(db_conn)


class DatabaseSink:
    """Writes one row per entry into ``table_name``."""

    def __init__(self, writer: TableWriter, table_name: str = DEFAULT_TABLE_NAME):
        self.writer = writer
        self.table_name = validate_table_name(table_name)
        self.name = "database"

    def ensure_table(self) -> None:
        self.writer.ensure_table(self.table_name)
        LOGGER.debug("Ensured log table %s", self.table_name)

    def emit(self, entry: LogEntry) -> None:
        self.writer.write_row(self.table_name, entry.to_row())
