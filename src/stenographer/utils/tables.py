"""Tabular helpers built on pandas."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pandas as pd


def _is_missing(v: Any) -> bool:
    try:
        return bool(pd.isna(v))
    except (TypeError, ValueError):
        # array-likes: pd.isna returns an array
        return False


def value_check(x: Any, y: Any) -> bool:
    """Default matcher: missing matches missing, otherwise equality."""
    if _is_missing(y):
        return _is_missing(x)
    if _is_missing(x):
        return False
    return bool(x == y)


def value_coordinates(
    df: pd.DataFrame,
    value: Any = pd.NA,
    eq_fun: Callable[[Any, Any], bool] = value_check,
) -> pd.DataFrame:
    """Locate cells for which ``eq_fun(cell, value)`` is true.

    Returns a DataFrame with 0-based ``column`` and ``row`` positions, sorted
    by column, then row. With no match the frame is empty but keeps both columns.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError("'df' must be a pandas DataFrame")
    if not callable(eq_fun):
        raise TypeError("'eq_fun' must be callable")

    n_rows, n_cols = df.shape
    hits = [
        (col, row)
        for col in range(n_cols)
        for row in range(n_rows)
        if eq_fun(df.iat[row, col], value)
    ]
    return pd.DataFrame(hits, columns=["column", "row"], dtype="int64")


def table_to_string(obj: Any) -> str:
    """Printed form of ``obj`` as a table, for embedding in messages or log data."""
    frame = obj if isinstance(obj, pd.DataFrame) else pd.DataFrame(obj)
    return frame.to_string()
