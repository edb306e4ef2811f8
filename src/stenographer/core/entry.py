"""Entry construction: format hook, timestamp and payload normalization."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from .errors import FormattingError
from .levels import LogLevel
from .models import LogEntry
from .serialize import is_absent, serialize_error, to_jsonable

FormatFn = Callable[[str, str], str]
Clock = Callable[[], datetime]


def identity_format(level: str, msg: str) -> str:
    """Default format hook: the message unchanged."""
    return msg


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing ``Z``."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_entry(
    level: LogLevel,
    raw_msg: str,
    data: Any = None,
    error: Any = None,
    context: Mapping[str, Any] | None = None,
    *,
    format_fn: FormatFn = identity_format,
    clock: Clock = utc_now,
) -> LogEntry:
    """Assemble a LogEntry for an emitted call.

    Raises FormattingError when ``format_fn`` raises or does not return a string.
    """
    if level is LogLevel.OFF:
        raise ValueError("OFF is not a call level")

    try:
        msg = format_fn(level.name, raw_msg)
    except Exception as e:
        raise FormattingError(f"format hook failed for {level.name} message: {e}") from e
    if not isinstance(msg, str):
        raise FormattingError(
            f"format hook must return str, got {type(msg).__name__}"
        )

    return LogEntry(
        datetime=format_timestamp(clock()),
        level=level.name,
        msg=msg,
        data=None if is_absent(data) else to_jsonable(data),
        error=None if is_absent(error) else to_jsonable(serialize_error(error)),
        context=None if is_absent(context) else to_jsonable(context),
    )
