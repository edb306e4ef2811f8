from __future__ import annotations

import pytest

from stenographer.utils import collapse, message_parallel


@pytest.mark.parametrize(
    ("items", "sep", "expected"),
    [
        (["a", "b", "c"], " ", "a b c"),
        (["a", "b", "c"], ", ", "a, b, c"),
        (["a", "b", "c"], "", "abc"),
        (["a", "b"], "\n", "a\nb"),
        ([1, 2, 3], ", ", "1, 2, 3"),
        ([1.5, 2.7], ", ", "1.5, 2.7"),
        (["a", "", "c"], ", ", "a, , c"),
        (["a"], ", ", "a"),
    ],
)
def test_collapse(items: list, sep: str, expected: str) -> None:
    assert collapse(items, sep) == expected


def test_collapse_single_string_unchanged() -> None:
    assert collapse("abc", ", ") == "abc"


def test_collapse_empty_returned_as_is() -> None:
    empty: list[str] = []
    assert collapse(empty) is empty


def test_collapse_accepts_generators() -> None:
    assert collapse((str(i) for i in range(3)), "-") == "0-1-2"


def test_message_parallel_writes_to_stdout_fd(capfd: pytest.CaptureFixture[str]) -> None:
    message_parallel("Number: ", 123, " String: ", "test")
    message_parallel('Hello "World"\tagain')
    assert capfd.readouterr().out == 'Number: 123 String: test\nHello "World"\tagain\n'


def test_message_parallel_empty(capfd: pytest.CaptureFixture[str]) -> None:
    message_parallel("")
    assert capfd.readouterr().out == "\n"
