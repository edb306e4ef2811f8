from __future__ import annotations

import json
from pathlib import Path

import pytest

from stenographer.core.errors import ClosedSinkError, ConfigurationError
from stenographer.core.models import LogEntry
from stenographer.core.sinks.json_file import FileSinkState, JsonFileSink


def _entry(msg: str, **extra) -> LogEntry:
    return LogEntry(datetime="2025-12-30T08:12:04.123Z", level="INFO", msg=msg, **extra)


def test_open_creates_directories_and_bracket(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "deeper" / "app.json"
    sink = JsonFileSink(path)
    assert sink.state is FileSinkState.UNINITIALIZED

    sink.open()

    assert path.read_text(encoding="utf-8") == "[\n"
    assert sink.state is FileSinkState.OPEN_EMPTY
    assert sink.is_empty
    assert not sink.is_closed


def test_open_existing_zero_size_file(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    path.touch()
    sink = JsonFileSink(path)
    sink.open()
    assert path.read_text(encoding="utf-8") == "[\n"


def test_append_and_close_produce_valid_array(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    sink = JsonFileSink(path)
    sink.open()

    sink.append(_entry("one", data={"n": 1}))
    assert sink.state is FileSinkState.OPEN_NONEMPTY
    sink.append(_entry("two"))
    sink.append(_entry("three"))
    sink.close()

    text = path.read_text(encoding="utf-8")
    assert text.startswith("[\n{")
    assert text.endswith("}\n]")
    assert text.count(",\n") == 2
    parsed = json.loads(text)
    assert [obj["msg"] for obj in parsed] == ["one", "two", "three"]
    assert parsed[0]["data"] == {"n": 1}
    assert "data" not in parsed[1]


def test_entries_are_single_line(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    sink = JsonFileSink(path)
    sink.open()
    sink.append(_entry("multi\nline", data={"nested": {"a": [1, 2]}}))
    sink.close()
    lines = path.read_text(encoding="utf-8").split("\n")
    assert lines == ["[", lines[1], "]"]


def test_close_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    sink = JsonFileSink(path)
    sink.open()
    sink.append(_entry("one"))
    sink.close()
    sink.close()
    assert path.read_text(encoding="utf-8").count("]") == 1
    assert sink.state is FileSinkState.CLOSED


def test_close_without_entries_leaves_opening_bracket(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    sink = JsonFileSink(path)
    sink.open()
    sink.close()
    assert path.read_text(encoding="utf-8") == "[\n"
    assert sink.is_closed
    assert sink.is_empty


def test_append_after_close_raises(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    sink = JsonFileSink(path)
    sink.open()
    sink.append(_entry("one"))
    sink.close()

    with pytest.raises(ClosedSinkError):
        sink.append(_entry("late"))
    assert json.loads(path.read_text(encoding="utf-8"))[-1]["msg"] == "one"


def test_append_before_open_raises(tmp_path: Path) -> None:
    sink = JsonFileSink(tmp_path / "app.json")
    with pytest.raises(ClosedSinkError):
        sink.append(_entry("early"))


def test_close_before_open_writes_nothing(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    sink = JsonFileSink(path)
    sink.close()
    assert not path.exists()
    assert sink.is_closed


def test_reopen_closed_file_extends_array(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    first = JsonFileSink(path)
    first.open()
    first.append(_entry("one"))
    first.close()

    second = JsonFileSink(path)
    second.open()
    assert second.state is FileSinkState.OPEN_NONEMPTY
    second.append(_entry("two"))
    second.close()

    assert [obj["msg"] for obj in json.loads(path.read_text(encoding="utf-8"))] == ["one", "two"]


def test_reopen_unterminated_file(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    first = JsonFileSink(path)
    first.open()
    first.append(_entry("one"))
    # no close: simulates a crashed process

    second = JsonFileSink(path)
    second.open()
    second.append(_entry("two"))
    second.close()

    assert len(json.loads(path.read_text(encoding="utf-8"))) == 2


def test_reopen_file_with_only_opening_bracket(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    path.write_text("[\n", encoding="utf-8")

    sink = JsonFileSink(path)
    sink.open()
    assert sink.state is FileSinkState.OPEN_EMPTY
    sink.append(_entry("one"))
    sink.close()

    assert path.read_text(encoding="utf-8").startswith("[\n{")
    assert len(json.loads(path.read_text(encoding="utf-8"))) == 1


def test_reopen_padded_empty_array(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    path.write_text("[" + " " * 100 + "]\n", encoding="utf-8")

    sink = JsonFileSink(path)
    sink.open()
    assert sink.state is FileSinkState.OPEN_EMPTY
    sink.append(_entry("one"))
    sink.close()

    assert [obj["msg"] for obj in json.loads(path.read_text(encoding="utf-8"))] == ["one"]


def test_reopen_closed_file_with_trailing_whitespace(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    path.write_text('[\n{"datetime": "x", "level": "INFO", "msg": "one"}\n]' + "\n" * 200, encoding="utf-8")

    sink = JsonFileSink(path)
    sink.open()
    assert sink.state is FileSinkState.OPEN_NONEMPTY
    sink.append(_entry("two"))
    sink.close()

    assert [obj["msg"] for obj in json.loads(path.read_text(encoding="utf-8"))] == ["one", "two"]


def test_open_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        JsonFileSink(tmp_path).open()


def test_reopen_large_closed_file(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    first = JsonFileSink(path)
    first.open()
    for i in range(50):
        first.append(_entry(f"entry {i}", data={"i": i}))
    first.close()

    second = JsonFileSink(path)
    second.open()
    second.append(_entry("last"))
    second.close()

    parsed = json.loads(path.read_text(encoding="utf-8"))
    assert len(parsed) == 51
    assert parsed[-1]["msg"] == "last"


def test_open_rejects_non_array_file(tmp_path: Path) -> None:
    path = tmp_path / "app.log"
    path.write_text("2025-12-30 [INFO] plain text\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        JsonFileSink(path).open()
    assert path.read_text(encoding="utf-8") == "2025-12-30 [INFO] plain text\n"


def test_two_sinks_keep_independent_state(tmp_path: Path) -> None:
    a = JsonFileSink(tmp_path / "a.json")
    b = JsonFileSink(tmp_path / "b.json")
    a.open()
    b.open()

    a.append(_entry("only in a"))
    b.close()

    assert not a.is_empty and not a.is_closed
    assert b.is_empty and b.is_closed
    a.append(_entry("still open"))
    a.close()
    assert len(json.loads((tmp_path / "a.json").read_text(encoding="utf-8"))) == 2
    assert (tmp_path / "b.json").read_text(encoding="utf-8") == "[\n"
