"""Standalone helpers; none of them touch logger state."""

from __future__ import annotations

from .tables import table_to_string, value_check, value_coordinates
from .text import collapse, message_parallel

__all__ = [
    "collapse",
    "message_parallel",
    "table_to_string",
    "value_check",
    "value_coordinates",
]
