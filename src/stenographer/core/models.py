"""Core data models for the logging pipeline."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

# Column order of the persisted table (after the auto-increment id).
ROW_FIELDS: tuple[str, ...] = ("datetime", "level", "context", "msg", "data", "error")


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One immutable record produced by a single log call."""

    datetime: str  # ISO-8601 UTC with milliseconds, e.g. 2025-01-31T10:00:00.123Z
    level: str
    msg: str
    data: Any = None  # JSON-compatible, None when absent
    error: Any = None
    context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Object form used by the JSON file; absent optional fields are omitted."""
        d: dict[str, Any] = {
            "datetime": self.datetime,
            "level": self.level,
            "msg": self.msg,
        }
        if self.data is not None:
            d["data"] = self.data
        if self.error is not None:
            d["error"] = self.error
        if self.context is not None:
            d["context"] = self.context
        return d

    def to_json(self) -> str:
        """Single-line JSON encoding of ``to_dict()``."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def to_row(self) -> dict[str, str | None]:
        """Table row: optional fields JSON-encoded, or None when absent."""

        def enc(value: Any) -> str | None:
            return None if value is None else json.dumps(value, ensure_ascii=False)

        return {
            "datetime": self.datetime,
            "level": self.level,
            "context": enc(self.context),
            "msg": self.msg,
            "data": enc(self.data),
            "error": enc(self.error),
        }

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> LogEntry:
        """Rebuild an entry from a persisted JSON object."""
        try:
            return cls(
                datetime=str(obj["datetime"]),
                level=str(obj["level"]),
                msg=str(obj["msg"]),
                data=obj.get("data"),
                error=obj.get("error"),
                context=obj.get("context"),
            )
        except KeyError as e:
            raise ValueError(f"Log entry is missing required key {e.args[0]!r}") from e
