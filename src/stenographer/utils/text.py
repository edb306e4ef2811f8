"""String helpers."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from typing import Any

STDOUT_FD = 1


def collapse(items: Iterable[Any] | str, sep: str = " ") -> Any:
    """Join the string forms of ``items`` with ``sep``.

    A single string is returned as is; an empty sequence is returned unchanged.
    """
    if isinstance(items, str):
        return items
    values = list(items)
    if not values:
        return items
    return sep.join(str(v) for v in values)


def message_parallel(*parts: Any) -> None:
    """Print from a forked worker process.

    Writes straight to the stdout file descriptor in a single unbuffered
    ``os.write`` so the text is not lost in the child's Python-level buffers.
    """
    text = "".join(str(p) for p in parts) + "\n"
    sys.stdout.flush()
    os.write(STDOUT_FD, text.encode("utf-8"))
