"""Pydantic v2 models for the backend scaffolder.

Defines the answers collected from the user (``ProjectConfig``), the
enumerations that drive template selection, and the per-path outcomes the
materializer reports back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ModuleType(str, Enum):
    """Module system of the generated project (``package.json`` ``type``)."""
    COMMONJS = "commonjs"
    ESM = "module"


class Database(str, Enum):
    """Database the generated project talks to."""
    MONGODB = "MongoDB"
    POSTGRESQL = "PostgreSQL"
    MYSQL = "MySQL"
    NONE = "None"


class StructureMode(str, Enum):
    """Whether the project uses the default folder set or user-supplied names."""
    DEFAULT = "Default"
    CUSTOM = "Custom"


class FileId(str, Enum):
    """Logical identifier of a generated file, independent of its on-disk name."""
    MANIFEST = "manifest"
    ENTRY_POINT = "entry_point"
    ROUTER = "router"
    CONTROLLER = "controller"
    DAO = "dao"
    MODEL = "model"
    MIDDLEWARE = "middleware"
    ENV = "env"
    DATABASE_CONFIG = "database_config"
    README = "readme"
    IGNORE = "ignore"
    DOCKERFILE = "dockerfile"
    COMPOSE = "compose"


class OutcomeStatus(str, Enum):
    """What happened to a single folder or file during materialization."""
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


FolderSet = tuple[str, ...]


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Answers describing the project to scaffold.  Immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, also the root folder name")
    description: str = Field(default="", description="package.json description")
    author: str = Field(default="", description="package.json author")
    module_type: ModuleType = Field(default=ModuleType.COMMONJS)
    database: Database = Field(default=Database.NONE)
    structure_mode: StructureMode = Field(default=StructureMode.DEFAULT)
    custom_folder_names: tuple[str, ...] = Field(
        default=(),
        description="Folder names used instead of the defaults in Custom mode",
    )
    docker_enabled: bool = Field(default=False)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name is required.")
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(
                f"Project name '{value}' must stay inside the output directory."
            )
        _reject_control_chars(value)
        return value

    @field_validator("description", "author")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("custom_folder_names", mode="before")
    @classmethod
    def _clean_folder_names(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        names = tuple(str(v).strip() for v in value if str(v).strip())
        for name in names:
            _reject_control_chars(name)
        return names


def _reject_control_chars(value: str) -> None:
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in value):
        raise ValueError(f"{value!r} contains control characters.")


# ---------------------------------------------------------------------------
# Planning / reporting
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FileSpec:
    """A file to generate: which template, and which folder it lands in.

    ``folder`` is ``None`` for files written at the project root.
    """

    file_id: FileId
    folder: Optional[str] = None


class FileOutcome(BaseModel):
    """Result of creating one folder or writing one file."""

    path: Path = Field(..., description="Absolute or root-relative target path")
    status: OutcomeStatus = Field(...)
    reason: str = Field(default="", description="Why the path was skipped or failed")
    is_dir: bool = Field(default=False)
