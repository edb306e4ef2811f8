"""Human-readable console rendering."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from colorama import Fore, Style

from ..models import LogEntry

# (role, text) -> text. Roles: "timestamp", "ERROR", "WARNING", "INFO",
# "message", "data", "error", "context".
Styler = Callable[[str, str], str]
PrintFn = Callable[[str], Any]

LEVEL_WIDTH = 7

_COLORS = {
    "timestamp": Style.DIM + Fore.WHITE,
    "ERROR": Fore.RED,
    "WARNING": Fore.YELLOW,
    "INFO": Fore.BLUE,
    "message": Fore.WHITE,
    "data": Fore.CYAN,
    "error": Fore.RED,
    "context": Fore.MAGENTA,
}


def plain_styler(role: str, text: str) -> str:
    """No styling; the default for non-terminal output."""
    return text


def colorama_styler(role: str, text: str) -> str:
    """ANSI colours via colorama; unknown roles render plain."""
    color = _COLORS.get(role)
    if color is None:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class ConsoleFormatter:
    """Render an entry as a header line plus optional Data/Error/Context blocks."""

    styler: Styler = plain_styler

    def render(self, entry: LogEntry) -> str:
        s = self.styler
        out = " ".join(
            [
                s("timestamp", entry.datetime),
                s(entry.level, f"{entry.level:<{LEVEL_WIDTH}}"),
                s("message", entry.msg),
            ]
        )
        if entry.data is not None:
            out += "\n" + s("data", "Data:") + "\n" + _pretty(entry.data)
        if entry.error is not None:
            out += "\n" + s("error", "Error:") + "\n" + _pretty(entry.error)
        if entry.context is not None:
            out += "\n" + s("context", "Context:") + "\n" + _pretty(entry.context)
        return out


@dataclass(slots=True)
class ConsoleSink:
    """Formats entries and hands the text to a print hook."""

    print_fn: PrintFn = print
    formatter: ConsoleFormatter = field(default_factory=ConsoleFormatter)
    name: str = "console"

    def emit(self, entry: LogEntry) -> None:
        self.print_fn(self.formatter.render(entry))
