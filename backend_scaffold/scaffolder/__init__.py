"""Backend scaffolder -- turns a ``ProjectConfig`` into a project on disk.

Quick usage::

    from backend_scaffold.scaffolder import ProjectConfig, ProjectMaterializer

    config = ProjectConfig(name="demo-api", database="PostgreSQL", docker_enabled=True)
    materializer = ProjectMaterializer(config)
    outcomes = materializer.materialize(materializer.project_root("/tmp"))
"""

from backend_scaffold.scaffolder.catalog import FILE_NAMES, render, render_formatted
from backend_scaffold.scaffolder.folders import DEFAULT_FOLDERS, parse_folder_list, resolve_folders
from backend_scaffold.scaffolder.formatter import ContentKind, format_content
from backend_scaffold.scaffolder.materializer import (
    ProjectMaterializer,
    materialize,
    plan_files,
    summarize,
)
from backend_scaffold.scaffolder.models import (
    Database,
    FileId,
    FileOutcome,
    FileSpec,
    ModuleType,
    OutcomeStatus,
    ProjectConfig,
    StructureMode,
)
from backend_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ContentKind",
    "DEFAULT_FOLDERS",
    "Database",
    "FILE_NAMES",
    "FileId",
    "FileOutcome",
    "FileSpec",
    "ModuleType",
    "OutcomeStatus",
    "ProjectConfig",
    "ProjectMaterializer",
    "StructureMode",
    "TemplateRenderer",
    "format_content",
    "materialize",
    "parse_folder_list",
    "plan_files",
    "render",
    "render_formatted",
    "resolve_folders",
    "summarize",
]
