"""Scaffolder settings.

Typed, validated knobs for the command-line tool.  These settings never
change *what* a template renders; they control where projects are written,
how generated text is indented, and how noisy the run is.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "BACKEND_SCAFFOLD_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """Global scaffolder settings.

    Instances are typically created once by the CLI entry point (from the
    environment, then overridden by flags) and passed to the materializer.
    """

    output_dir: Path = Field(
        default=Path("."), description="Parent directory the project folder is created in"
    )
    indent_size: int = Field(
        default=2, ge=1, le=8, description="Indent width for generated JavaScript/JSON"
    )
    dedupe_folders: bool = Field(
        default=True, description="Collapse repeated custom folder names"
    )
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            BACKEND_SCAFFOLD_OUTPUT_DIR, BACKEND_SCAFFOLD_INDENT_SIZE,
            BACKEND_SCAFFOLD_DEDUPE_FOLDERS, BACKEND_SCAFFOLD_LOG_LEVEL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get(f"{ENV_PREFIX}OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ[f"{ENV_PREFIX}OUTPUT_DIR"])
        if os.environ.get(f"{ENV_PREFIX}INDENT_SIZE"):
            kwargs["indent_size"] = int(os.environ[f"{ENV_PREFIX}INDENT_SIZE"])
        if os.environ.get(f"{ENV_PREFIX}DEDUPE_FOLDERS"):
            kwargs["dedupe_folders"] = _parse_bool(os.environ[f"{ENV_PREFIX}DEDUPE_FOLDERS"])
        if os.environ.get(f"{ENV_PREFIX}LOG_LEVEL"):
            kwargs["log_level"] = os.environ[f"{ENV_PREFIX}LOG_LEVEL"]
        return cls(**kwargs)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"Expected a boolean value, got {raw!r}")
