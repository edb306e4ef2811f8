"""Construction options for Stenographer."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.entry import identity_format, utc_now
from .core.errors import ConfigurationError, InvalidLevelError
from .core.levels import LogLevel, parse_level
from .core.sinks.console import plain_styler
from .core.sinks.database import DEFAULT_TABLE_NAME, validate_table_name

LEVEL_ENV = "STENOGRAPHER_LEVEL"


class StenographerConfig(BaseModel):
    """Validated logger options; ``level=None`` defers to the environment."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    level: LogLevel | None = None
    file_path: Path | None = None
    db_conn: Any = None
    table_name: str = DEFAULT_TABLE_NAME
    print_fn: Callable[[str], Any] = print
    format_fn: Callable[[str, str], str] = identity_format
    context: dict[str, Any] = Field(default_factory=dict)
    styler: Callable[[str, str], str] = plain_styler
    clock: Callable[[], Any] = utc_now
    raise_sink_errors: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, v: Any) -> LogLevel | None:
        return None if v is None else parse_level(v)

    @field_validator("file_path", mode="before")
    @classmethod
    def _non_empty_path(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            raise ValueError("file_path must not be empty when given")
        return v

    @field_validator("table_name")
    @classmethod
    def _plain_identifier(cls, v: str) -> str:
        return validate_table_name(v)


def resolve_config(cfg: StenographerConfig) -> StenographerConfig:
    """Return config with the level filled in from the environment (default INFO)."""
    if cfg.level is not None:
        return cfg

    env = os.getenv(LEVEL_ENV)
    if env is None or env == "":
        return cfg.model_copy(update={"level": LogLevel.INFO})

    try:
        level = parse_level(env)
    except InvalidLevelError as exc:
        raise ConfigurationError(
            f"{LEVEL_ENV} must be one of OFF, ERROR, WARNING, INFO (got {env!r})"
        ) from exc
    return cfg.model_copy(update={"level": level})
