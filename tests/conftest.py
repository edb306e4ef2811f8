from __future__ import annotations

import sqlite3
from collections.abc import Callable, Iterator
from datetime import UTC, datetime

import pytest

FIXED_NOW = datetime(2025, 12, 30, 8, 12, 4, 123456, tzinfo=UTC)


@pytest.fixture
def printed() -> list[str]:
    """Collects everything handed to a ``print_fn``; use ``printed.append``."""
    return []


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def sqlite_conn() -> Iterator[sqlite3.Connection]:
    conn = sqlite3.connect(":memory:")
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(autouse=True)
def _no_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STENOGRAPHER_LEVEL", raising=False)
