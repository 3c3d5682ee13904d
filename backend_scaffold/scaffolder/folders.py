"""Folder resolution: which directories the generated project gets."""

from __future__ import annotations

import logging
from pathlib import PurePath

from backend_scaffold.errors import ConfigurationError

from .models import FolderSet, ProjectConfig, StructureMode

logger = logging.getLogger(__name__)

DEFAULT_FOLDERS: FolderSet = (
    "routes",
    "controllers",
    "daos",
    "models",
    "middleware",
    "configurations",
)


def parse_folder_list(raw: str) -> FolderSet:
    """Split a comma-separated answer into folder names.

    Examples::

        parse_folder_list("a, b, , c") -> ("a", "b", "c")
    """
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _check_relative(name: str) -> None:
    path = PurePath(name)
    if path.is_absolute() or ".." in path.parts:
        raise ConfigurationError(
            f"Folder name '{name}' must stay inside the project directory."
        )


def resolve_folders(config: ProjectConfig, *, dedupe: bool = True) -> FolderSet:
    """Return the folders to create for *config*, in creation order.

    Custom names replace the defaults entirely.  With *dedupe* a repeated
    custom name keeps only its first occurrence.

    Raises:
        ConfigurationError: If Custom mode has no usable folder names, or a
            name points outside the project root.
    """
    if config.structure_mode is StructureMode.DEFAULT:
        return DEFAULT_FOLDERS

    names = config.custom_folder_names
    if not names:
        raise ConfigurationError(
            "Custom structure selected but no folder names were given."
        )
    for name in names:
        _check_relative(name)

    if not dedupe:
        return tuple(names)

    unique = tuple(dict.fromkeys(names))
    if len(unique) != len(names):
        dropped = sorted({n for n in names if names.count(n) > 1})
        logger.warning("Ignoring duplicate folder names: %s", ", ".join(dropped))
    return unique
