"""Per-logger contextual metadata."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def _copy_value(value: Any) -> Any:
    # Values that refuse deep copying (locks, sockets, ...) are kept by reference.
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        return value


class ContextStore:
    """Mutable key/value mapping merged into every entry of one logger."""

    def __init__(self, initial: Mapping[str, Any] | None = None):
        self._data: dict[str, Any] = {}
        if initial:
            self.update(initial)

    def update(self, new_entries: Mapping[str, Any]) -> None:
        """Merge keys into the context; colliding keys are overwritten."""
        if not isinstance(new_entries, Mapping):
            raise TypeError(
                f"context update must be a mapping, got {type(new_entries).__name__}"
            )
        for key, value in new_entries.items():
            self._data[key] = _copy_value(value)

    def clear(self) -> None:
        self._data = {}

    def snapshot(self) -> dict[str, Any]:
        """Copy of the current context; mutating it does not affect the store."""
        return {key: _copy_value(value) for key, value in self._data.items()}

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ContextStore({self._data!r})"
