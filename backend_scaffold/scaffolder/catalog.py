"""Template catalog: maps each ``FileId`` to the text of the file it names.

Every generator reads only the configuration fields it needs and returns raw
(unformatted) text.  The formatter runs afterwards, see
:func:`render_formatted`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from backend_scaffold.errors import ConfigurationError

from .folders import DEFAULT_FOLDERS
from .formatter import content_kind_for, format_content
from .models import Database, FileId, FolderSet, ModuleType, ProjectConfig, StructureMode
from .templates import get_renderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Static tables
# ---------------------------------------------------------------------------

FILE_NAMES: dict[FileId, str] = {
    FileId.MANIFEST: "package.json",
    FileId.ENTRY_POINT: "index.js",
    FileId.ROUTER: "router.js",
    FileId.CONTROLLER: "controller.js",
    FileId.DAO: "dao.js",
    FileId.MODEL: "model.js",
    FileId.MIDDLEWARE: "middleware.js",
    FileId.ENV: ".env",
    FileId.DATABASE_CONFIG: "dbConfig.js",
    FileId.README: "README.md",
    FileId.IGNORE: ".gitignore",
    FileId.DOCKERFILE: "Dockerfile",
    FileId.COMPOSE: "docker-compose.yml",
}

BASE_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "nodemon": "^3.0.1",
    "dotenv": "^16.0.0",
}

DATABASE_DEPENDENCIES: dict[Database, dict[str, str]] = {
    Database.MONGODB: {"mongoose": "^6.0.0"},
    Database.POSTGRESQL: {"pg": "^8.7.1"},
    Database.MYSQL: {"mysql2": "^2.3.0"},
    Database.NONE: {},
}

# Relational drivers share one code shape; only these pieces differ.
SQL_DRIVERS: dict[Database, dict[str, str]] = {
    Database.POSTGRESQL: {
        "driver": "pg",
        "binding": "pg",
        "pool_factory": "new pg.Pool({ connectionString: process.env.DB_URL })",
        "id_column": "id SERIAL PRIMARY KEY",
        "rows": "result.rows",
    },
    Database.MYSQL: {
        "driver": "mysql2/promise",
        "binding": "mysql",
        "pool_factory": "mysql.createPool(process.env.DB_URL)",
        "id_column": "id INT AUTO_INCREMENT PRIMARY KEY",
        "rows": "result[0]",
    },
}


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

def render_manifest(config: ProjectConfig) -> str:
    """Build ``package.json`` for the project."""
    dependencies = dict(BASE_DEPENDENCIES)
    dependencies.update(DATABASE_DEPENDENCIES[config.database])

    manifest = {
        "name": config.name or "my-project",
        "version": "1.0.0",
        "description": config.description,
        "main": "index.js",
        "scripts": {
            "start": "node index.js",
            "dev": "nodemon index.js",
            "test": 'echo "Error: no test specified" && exit 1',
        },
        "keywords": [],
        "author": config.author,
        "license": "ISC",
        "type": config.module_type.value,
        "dependencies": dependencies,
    }
    return json.dumps(manifest, indent=2)


def _source_context(module_type: ModuleType | str) -> dict[str, Any]:
    return {"esm": ModuleType(module_type) is ModuleType.ESM}


def _render_source(template: str, module_type: ModuleType | str) -> str:
    return get_renderer().render(template, _source_context(module_type))


def render_entry_point(module_type: ModuleType | str) -> str:
    return _render_source("index.js.j2", module_type)


def render_router(module_type: ModuleType | str) -> str:
    return _render_source("router.js.j2", module_type)


def render_controller(module_type: ModuleType | str) -> str:
    return _render_source("controller.js.j2", module_type)


def render_dao(module_type: ModuleType | str) -> str:
    return _render_source("dao.js.j2", module_type)


def render_middleware(module_type: ModuleType | str) -> str:
    return _render_source("middleware.js.j2", module_type)


def _coerce_database(database: Database | str) -> Database | None:
    try:
        return Database(database)
    except ValueError:
        return None


def render_model(module_type: ModuleType | str, database: Database | str) -> str:
    """Render ``model.js``.

    Unknown databases and ``Database.NONE`` produce a placeholder comment
    instead of an error; a project may exist without a model.
    """
    db = _coerce_database(database)
    context = _source_context(module_type)
    context["database"] = db.value if db is not None else str(database)
    context["sql"] = SQL_DRIVERS.get(db) if db is not None else None
    return get_renderer().render("model.js.j2", context)


def render_database_config(module_type: ModuleType | str, database: Database | str) -> str:
    """Render ``dbConfig.js`` for a concrete database.

    Raises:
        ConfigurationError: If *database* is ``None`` or not a known
            database.  This generator is only planned when the user picked
            one.
    """
    db = _coerce_database(database)
    if db is None or db is Database.NONE:
        raise ConfigurationError(f"Unsupported database type: {database!r}")
    context = _source_context(module_type)
    context["database"] = db.value
    context["sql"] = SQL_DRIVERS.get(db)
    return get_renderer().render("dbConfig.js.j2", context)


def _listed_folders(config: ProjectConfig) -> FolderSet:
    """Folders named in the README, in creation order, without repeats."""
    if config.structure_mode is StructureMode.CUSTOM:
        return tuple(dict.fromkeys(config.custom_folder_names))
    return DEFAULT_FOLDERS


def render_readme(name: str, folders: FolderSet = DEFAULT_FOLDERS) -> str:
    return get_renderer().render(
        "README.md.j2", {"project_name": name, "folders": list(folders)}
    )


def _render_fixed(template: str) -> str:
    return get_renderer().render(template, {})


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_GENERATORS: dict[FileId, Callable[[ProjectConfig], str]] = {
    FileId.MANIFEST: render_manifest,
    FileId.ENTRY_POINT: lambda c: render_entry_point(c.module_type),
    FileId.ROUTER: lambda c: render_router(c.module_type),
    FileId.CONTROLLER: lambda c: render_controller(c.module_type),
    FileId.DAO: lambda c: render_dao(c.module_type),
    FileId.MODEL: lambda c: render_model(c.module_type, c.database),
    FileId.MIDDLEWARE: lambda c: render_middleware(c.module_type),
    FileId.ENV: lambda c: _render_fixed("env.j2"),
    FileId.DATABASE_CONFIG: lambda c: render_database_config(c.module_type, c.database),
    FileId.README: lambda c: render_readme(c.name, _listed_folders(c)),
    FileId.IGNORE: lambda c: _render_fixed("gitignore.j2"),
    FileId.DOCKERFILE: lambda c: _render_fixed("Dockerfile.j2"),
    FileId.COMPOSE: lambda c: _render_fixed("docker-compose.yml.j2"),
}


def render(file_id: FileId | str, config: ProjectConfig) -> str:
    """Return the raw text of *file_id* for *config*.

    Unknown identifiers yield an empty string.
    """
    try:
        key = FileId(file_id)
    except ValueError:
        logger.debug("No template registered for file id %r", file_id)
        return ""
    return _GENERATORS[key](config)


def render_formatted(
    file_id: FileId | str, config: ProjectConfig, *, indent_size: int = 2
) -> str:
    """Render *file_id* and pass the text through the content formatter."""
    text = render(file_id, config)
    if not text:
        return text
    filename = FILE_NAMES[FileId(file_id)]
    return format_content(text, content_kind_for(filename), indent_size=indent_size)
