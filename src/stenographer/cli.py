from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

import colorama

from .core.errors import InvalidLevelError
from .core.levels import LogLevel, parse_level
from .core.models import LogEntry
from .core.sinks.console import ConsoleFormatter, colorama_styler, plain_styler
from .reader import iter_log_entries

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.getenv("STENOGRAPHER_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_levels(s: str) -> list[LogLevel]:
    out: list[LogLevel] = []
    for part in s.split(","):
        name = part.strip()
        if not name:
            continue
        try:
            level = parse_level(name)
        except InvalidLevelError as e:
            raise argparse.ArgumentTypeError(
                "Invalid level. Allowed: ERROR, WARNING, INFO"
            ) from e
        if level is LogLevel.OFF:
            raise argparse.ArgumentTypeError("OFF is not an entry level")
        out.append(level)
    if not out:
        raise argparse.ArgumentTypeError("At least one level must be provided")
    return out


async def _collect(path: Path, levels: list[LogLevel] | None) -> list[LogEntry]:
    return [e async for e in iter_log_entries(path, levels=levels)]


def main(argv: Sequence[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Render a Stenographer JSON log file.")
    p.add_argument("log_path")
    p.add_argument(
        "--levels",
        type=_parse_levels,
        default=None,
        help="Comma-separated (e.g., ERROR,WARNING). Default: all levels",
    )
    p.add_argument("--color", dest="color", action="store_true", help="Force coloured output")
    p.add_argument("--no-color", dest="color", action="store_false", help="Disable colours")
    p.set_defaults(color=None)

    args = p.parse_args(argv)
    _configure_logging()

    color = sys.stdout.isatty() if args.color is None else args.color
    if color:
        colorama.just_fix_windows_console()
    formatter = ConsoleFormatter(styler=colorama_styler if color else plain_styler)

    path = Path(args.log_path)
    LOGGER.debug("Reading %s", path)
    try:
        entries = asyncio.run(_collect(path, args.levels))
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    for entry in entries:
        print(formatter.render(entry))

    print(f"\nFound {len(entries)} entries.")


if __name__ == "__main__":
    main()
