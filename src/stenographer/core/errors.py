"""Exception taxonomy for the logging pipeline."""

from __future__ import annotations

from collections.abc import Sequence


class StenographerError(Exception):
    """Base class for all errors raised by the package."""


class ConfigurationError(StenographerError, ValueError):
    """Invalid construction options (fatal to the constructor call)."""


class InvalidLevelError(StenographerError, ValueError):
    """A level value outside the fixed LogLevel enumeration."""


class ClosedSinkError(StenographerError, RuntimeError):
    """An entry was appended to a sink that is not open."""


class FormattingError(StenographerError):
    """The injected format hook failed; nothing was dispatched."""


class SinkIOError(StenographerError, OSError):
    """One or more sinks failed while the others still ran."""

    def __init__(self, failures: Sequence[tuple[str, BaseException]]):
        self.failures: list[tuple[str, BaseException]] = list(failures)
        detail = "; ".join(f"{name}: {exc}" for name, exc in self.failures)
        super().__init__(f"{len(self.failures)} sink(s) failed: {detail}")
