"""Sink interface."""

from __future__ import annotations

from typing import Protocol

from ..models import LogEntry


class Sink(Protocol):
    """Destination for built entries."""

    name: str

    def emit(self, entry: LogEntry) -> None:
        """Deliver one entry; raise on failure."""
        ...
