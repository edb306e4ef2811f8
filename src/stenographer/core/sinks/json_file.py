"""JSON-array file sink.

The file is kept as one JSON array for the lifetime of the sink::

    [
    {"datetime": ..., "level": "INFO", "msg": "first"},
    {"datetime": ..., "level": "ERROR", "msg": "second"}
    ]

The opening bracket is written when the sink is opened on an empty file,
entries are separated by ``",\\n"``, and the closing ``"\\n]"`` is written
once by ``close()``. A sink that never received an entry is left as ``"[\\n"``
on close, which is not valid JSON.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from ..errors import ClosedSinkError, ConfigurationError
from ..models import LogEntry

LOGGER = logging.getLogger(__name__)

OPEN_BRACKET = "[\n"
SEPARATOR = ",\n"
CLOSE_BRACKET = "\n]"

# Chunk size used when inspecting an existing file on reopen.
_PEEK_BYTES = 64


class FileSinkState(str, Enum):
    UNINITIALIZED = "UNINITIALIZED"
    OPEN_EMPTY = "OPEN_EMPTY"
    OPEN_NONEMPTY = "OPEN_NONEMPTY"
    CLOSED = "CLOSED"


class JsonFileSink:
    """Append-only writer that maintains a JSON array in a single file."""

    def __init__(self, path: str | os.PathLike[str], *, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self.name = "file"
        self._opened = False
        self._is_empty = True
        self._is_closed = False

    @property
    def state(self) -> FileSinkState:
        if self._is_closed:
            return FileSinkState.CLOSED
        if not self._opened:
            return FileSinkState.UNINITIALIZED
        return FileSinkState.OPEN_EMPTY if self._is_empty else FileSinkState.OPEN_NONEMPTY

    @property
    def is_empty(self) -> bool:
        """True while no entry sits between the brackets."""
        return self._is_empty

    @property
    def is_closed(self) -> bool:
        return self._is_closed

    def open(self) -> None:
        """Ensure the file exists and holds an open JSON array."""
        if self._opened or self._is_closed:
            return

        if self.path.exists() and not self.path.is_file():
            raise ConfigurationError(f"{self.path} exists and is not a regular file")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.touch()
            LOGGER.debug("Created log file %s", self.path)

        if self.path.stat().st_size == 0:
            self._write(OPEN_BRACKET, mode="w")
            self._is_empty = True
        else:
            self._is_empty = self._resume()
        self._opened = True
        LOGGER.debug("Opened log file %s (state=%s)", self.path, self.state.value)

    def _resume(self) -> bool:
        """Prepare an existing file for appends; return True if it holds no entries.

        A closing bracket left by a previous close is truncated so the array
        can be extended.
        """
        with self.path.open("r+b") as f:
            raw = f.read(_PEEK_BYTES)
            head = raw.lstrip()
            if not head.startswith(b"["):
                raise ConfigurationError(f"{self.path} is not a JSON array log file")
            after_bracket = len(raw) - len(head) + 1

            end = _content_end(f, f.seek(0, os.SEEK_END))
            f.seek(end - 1)
            if f.read(1) == b"]":
                end = _content_end(f, end - 1)
                LOGGER.debug("Reopening closed log file %s", self.path)

            if end <= after_bracket:
                f.seek(0)
                f.truncate(0)
                f.write(OPEN_BRACKET.encode(self.encoding))
                return True

            f.truncate(end)
            return False

    def append(self, entry: LogEntry) -> None:
        """Write one entry; raises ClosedSinkError unless the sink is open."""
        if self._is_closed:
            raise ClosedSinkError(f"log file {self.path} is closed")
        if not self._opened:
            raise ClosedSinkError(f"log file {self.path} was never opened")

        payload = entry.to_json()
        if not self._is_empty:
            payload = SEPARATOR + payload
        self._write(payload)
        self._is_empty = False

    emit = append

    def close(self) -> None:
        """Terminate the array (only if it holds entries). Idempotent."""
        if self._is_closed:
            return
        if self._opened and not self._is_empty:
            self._write(CLOSE_BRACKET)
        self._is_closed = True
        LOGGER.debug("Closed log file %s", self.path)

    def _write(self, text: str, *, mode: str = "a") -> None:
        with self.path.open(mode, encoding=self.encoding) as f:
            f.write(text)
            f.flush()

    def __repr__(self) -> str:
        return f"JsonFileSink(path={str(self.path)!r}, state={self.state.value})"


def _content_end(f: BinaryIO, end: int) -> int:
    """Offset just past the last non-whitespace byte before ``end``."""
    while end > 0:
        start = max(0, end - _PEEK_BYTES)
        f.seek(start)
        chunk = f.read(end - start).rstrip()
        if chunk:
            return start + len(chunk)
        end = start
    return 0
