"""Async loading of persisted JSON-array log files."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterable
from pathlib import Path
from typing import Any

import aiofiles

from .core.levels import LogLevel, parse_level
from .core.models import LogEntry


def parse_log_text(text: str) -> list[dict[str, Any]]:
    """Parse file content, tolerating an array that was never closed."""
    s = text.strip()
    if not s:
        return []
    if not s.startswith("["):
        raise ValueError("Log file does not contain a JSON array")
    if not s.endswith("]"):
        s += "\n]"

    data = json.loads(s)
    if not isinstance(data, list) or not all(isinstance(obj, dict) for obj in data):
        raise ValueError("Log file must be a JSON array of objects")
    return data


async def read_log_file(log_path: str | Path, *, encoding: str = "utf-8") -> list[dict[str, Any]]:
    """Return the entries of a log file as plain dicts."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    async with aiofiles.open(path, encoding=encoding) as f:
        text = await f.read()
    return parse_log_text(text)


async def iter_log_entries(
    log_path: str | Path,
    *,
    levels: Iterable[LogLevel | int | str] | None = None,
    encoding: str = "utf-8",
) -> AsyncIterator[LogEntry]:
    """Yield LogEntry objects, optionally only those at the given levels."""
    allowed: set[str] | None = None
    if levels is not None:
        allowed = {parse_level(level).name for level in levels}
        if not allowed:
            return

    for obj in await read_log_file(log_path, encoding=encoding):
        entry = LogEntry.from_dict(obj)
        if allowed is not None and entry.level not in allowed:
            continue
        yield entry
