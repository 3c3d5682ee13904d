"""Exceptions raised by the scaffolder.

Only two conditions abort a run: an unusable configuration and a project
root that already exists.  Files or folders that already exist *inside* the
root are reported as skipped outcomes, never raised.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error the scaffolder raises on purpose."""


class ConfigurationError(ScaffoldError):
    """Raised when the project configuration cannot be materialized.

    Examples: asking for a database connection file without a concrete
    database, or a custom folder structure with no usable folder names.
    """


class ConflictError(ScaffoldError):
    """Raised when the project root folder already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Folder '{self.path}' already exists. Please choose a different name."
        )
