"""Conversion of log payloads into JSON-compatible values."""

from __future__ import annotations

import dataclasses
import math
import traceback
from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
from typing import Any

import pandas as pd
from pydantic import BaseModel


def serialize_error(value: Any) -> Any:
    """Normalize an exception into ``{name, message, call}``.

    Non-exception values are returned unchanged. Never raises.
    """
    if not isinstance(value, BaseException):
        return value
    try:
        return {
            "name": type(value).__name__,
            "message": str(value),
            "call": _call_site(value),
        }
    except Exception:
        return value


def _call_site(exc: BaseException) -> str:
    """Source text of the innermost traceback frame ("" when unavailable)."""
    tb = exc.__traceback__
    if tb is None:
        return ""
    frames = traceback.extract_tb(tb)
    if not frames:
        return ""
    frame = frames[-1]
    return (frame.line or "").strip()


def to_jsonable(value: Any) -> Any:
    """Return a deep, JSON-compatible copy of ``value``."""
    if isinstance(value, Enum):
        return to_jsonable(value.value)
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        # JSON has no NaN/Infinity.
        return value if math.isfinite(value) else None
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(dataclasses.asdict(value))
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=repr) if isinstance(value, (set, frozenset)) else value
        return [to_jsonable(v) for v in items]
    if isinstance(value, pd.DataFrame):
        return to_jsonable(value.to_dict(orient="records"))
    if isinstance(value, pd.Series):
        return to_jsonable(value.tolist())
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if hasattr(value, "dtype") and hasattr(value, "tolist"):
        # numpy scalars and arrays
        return to_jsonable(value.tolist())
    if isinstance(value, BaseException):
        return to_jsonable(serialize_error(value))
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def is_absent(value: Any) -> bool:
    """True for None and empty containers (strings are always present)."""
    if value is None:
        return True
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False
