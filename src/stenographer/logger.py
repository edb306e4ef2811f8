"""The Stenographer logger.

One configurable class covers every combination of sinks: console output is
always on, the JSON-array file sink is enabled by ``file_path`` and the
database sink by ``db_conn``.

Example::

    with Stenographer(file_path="logs/app.json", context={"app": "api"}) as steno:
        steno.info("started", data={"port": 8080})
        try:
            connect()
        except OSError as e:
            steno.error("connect failed", error=e)
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import StenographerConfig, resolve_config
from .core.context import ContextStore
from .core.dispatch import SinkDispatcher
from .core.entry import build_entry, identity_format, utc_now
from .core.errors import ConfigurationError
from .core.levels import LogLevel, parse_level, should_emit
from .core.sinks.base import Sink
from .core.sinks.console import ConsoleFormatter, ConsoleSink, plain_styler
from .core.sinks.database import DEFAULT_TABLE_NAME, DatabaseSink, as_table_writer
from .core.sinks.json_file import JsonFileSink

LOGGER = logging.getLogger(__name__)


def _close_at_exit(sink: JsonFileSink) -> None:
    # Runs from weakref.finalize; must not reference the logger.
    if not sink.is_closed:
        LOGGER.debug("Closing %s from finalizer", sink.path)
        sink.close()


class Stenographer:
    """Leveled structured logger with console, JSON file and database sinks."""

    def __init__(
        self,
        level: LogLevel | int | str | None = None,
        file_path: str | Path | None = None,
        db_conn: Any = None,
        table_name: str = DEFAULT_TABLE_NAME,
        print_fn: Callable[[str], Any] = print,
        format_fn: Callable[[str, str], str] = identity_format,
        context: Mapping[str, Any] | None = None,
        *,
        styler: Callable[[str, str], str] = plain_styler,
        clock: Callable[[], Any] = utc_now,
        raise_sink_errors: bool = True,
    ):
        try:
            cfg = StenographerConfig(
                level=level,
                file_path=file_path,
                db_conn=db_conn,
                table_name=table_name,
                print_fn=print_fn,
                format_fn=format_fn,
                context={} if context is None else context,
                styler=styler,
                clock=clock,
                raise_sink_errors=raise_sink_errors,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Stenographer options: {e}") from e
        cfg = resolve_config(cfg)

        self._level: LogLevel = cfg.level
        self._format_fn = cfg.format_fn
        self._clock = cfg.clock
        self._context = ContextStore(cfg.context)
        self._closed = False

        sinks: list[Sink] = [
            ConsoleSink(print_fn=cfg.print_fn, formatter=ConsoleFormatter(styler=cfg.styler))
        ]

        # Validate the connection before any file is created.
        writer = as_table_writer(cfg.db_conn) if cfg.db_conn is not None else None

        self._file_sink: JsonFileSink | None = None
        self._finalizer: weakref.finalize | None = None
        if cfg.file_path is not None:
            self._file_sink = JsonFileSink(cfg.file_path)
            self._file_sink.open()
            self._finalizer = weakref.finalize(self, _close_at_exit, self._file_sink)
            sinks.append(self._file_sink)

        self._db_sink: DatabaseSink | None = None
        if writer is not None:
            self._db_sink = DatabaseSink(writer, cfg.table_name)
            self._db_sink.ensure_table()
            sinks.append(self._db_sink)

        self._dispatcher = SinkDispatcher(sinks, raise_errors=cfg.raise_sink_errors)

    # Level

    @property
    def level(self) -> LogLevel:
        """Configured minimum level (read-only; use set_level)."""
        return self._level

    def get_level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel | int | str) -> None:
        """Change the minimum level; InvalidLevelError keeps the previous one."""
        self._level = parse_level(level)

    # Context

    def update_context(self, new_context: Mapping[str, Any]) -> None:
        """Merge keys into the context attached to every entry."""
        self._context.update(new_context)

    def clear_context(self) -> None:
        self._context.clear()

    def get_context(self) -> dict[str, Any]:
        """Copy of the current context."""
        return self._context.snapshot()

    # Log calls

    def error(self, msg: str, data: Any = None, error: Any = None) -> None:
        self._log(LogLevel.ERROR, msg, data, error)

    def warn(self, msg: str, data: Any = None) -> None:
        self._log(LogLevel.WARNING, msg, data)

    warning = warn

    def info(self, msg: str, data: Any = None) -> None:
        self._log(LogLevel.INFO, msg, data)

    def _log(self, level: LogLevel, msg: str, data: Any = None, error: Any = None) -> None:
        if not should_emit(self._level, level):
            return
        entry = build_entry(
            level,
            msg,
            data,
            error,
            self._context.snapshot() if self._context else None,
            format_fn=self._format_fn,
            clock=self._clock,
        )
        self._dispatcher.dispatch(entry)

    # Lifecycle

    @property
    def file_path(self) -> Path | None:
        return None if self._file_sink is None else self._file_sink.path

    @property
    def table_name(self) -> str | None:
        return None if self._db_sink is None else self._db_sink.table_name

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Terminate the JSON file array. Idempotent; a no-op without a file sink."""
        if self._closed:
            return
        if self._file_sink is not None:
            self._file_sink.close()
            if self._finalizer is not None:
                self._finalizer.detach()
        self._closed = True

    def __enter__(self) -> Stenographer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Stenographer(level={self._level.name}, file_path={self.file_path}, "
            f"table_name={self.table_name})"
        )
