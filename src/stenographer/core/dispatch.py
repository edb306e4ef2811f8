"""Fan-out of built entries to the configured sinks."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import ClosedSinkError, SinkIOError
from .models import LogEntry
from .sinks.base import Sink

LOGGER = logging.getLogger(__name__)


class SinkDispatcher:
    """Deliver each entry to every sink; one sink failing never skips the others.

    After all sinks ran, a ClosedSinkError is re-raised as is. Other failures
    are logged and, when ``raise_errors`` is set, raised together as SinkIOError.
    """

    def __init__(self, sinks: Sequence[Sink] = (), *, raise_errors: bool = True):
        self.sinks: list[Sink] = list(sinks)
        self.raise_errors = raise_errors

    def dispatch(self, entry: LogEntry) -> None:
        closed: ClosedSinkError | None = None
        failures: list[tuple[str, BaseException]] = []

        for sink in self.sinks:
            try:
                sink.emit(entry)
            except ClosedSinkError as exc:
                closed = closed or exc
            except Exception as exc:
                LOGGER.warning("Sink %r failed: %s", sink.name, exc, exc_info=exc)
                failures.append((sink.name, exc))

        if closed is not None:
            raise closed
        if failures and self.raise_errors:
            raise SinkIOError(failures)
