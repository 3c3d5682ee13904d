"""Project materializer.

Takes a ``ProjectConfig`` and writes the generated project to disk: the root
folder, the resolved folder set, one file per known folder, the root-level
files and, when requested, the Docker files.

An existing project root aborts the run before anything is written.  Any
folder or file that already exists *inside* the root is left untouched and
reported as skipped.  Nothing is rolled back.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from backend_scaffold.config import Settings
from backend_scaffold.errors import ConflictError

from .catalog import FILE_NAMES, render_formatted
from .folders import resolve_folders
from .models import (
    Database,
    FileId,
    FileOutcome,
    FileSpec,
    FolderSet,
    OutcomeStatus,
    ProjectConfig,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Static layout
# ---------------------------------------------------------------------------

FOLDER_FILES: dict[str, tuple[FileId, ...]] = {
    "routes": (FileId.ROUTER,),
    "controllers": (FileId.CONTROLLER,),
    "daos": (FileId.DAO,),
    "models": (FileId.MODEL,),
    "middleware": (FileId.MIDDLEWARE,),
    "configurations": (FileId.DATABASE_CONFIG,),
}

ROOT_FILES: tuple[FileId, ...] = (
    FileId.MANIFEST,
    FileId.ENTRY_POINT,
    FileId.ENV,
    FileId.README,
    FileId.IGNORE,
)

DOCKER_FILES: tuple[FileId, ...] = (FileId.DOCKERFILE, FileId.COMPOSE)

# Folders each generated source file imports from.
FILE_IMPORTS: dict[FileId, tuple[str, ...]] = {
    FileId.ENTRY_POINT: ("routes",),
    FileId.ROUTER: ("controllers", "middleware"),
    FileId.CONTROLLER: ("daos",),
    FileId.MODEL: ("configurations",),
}


def _warn_missing_imports(
    config: ProjectConfig, specs: list[FileSpec], folders: FolderSet
) -> None:
    present = set(folders)
    for spec in specs:
        needed = FILE_IMPORTS.get(spec.file_id, ())
        if spec.file_id is FileId.MODEL and config.database is Database.NONE:
            needed = ()
        missing = [folder for folder in needed if folder not in present]
        if missing:
            logger.warning(
                "%s imports from missing folder(s): %s",
                FILE_NAMES[spec.file_id],
                ", ".join(missing),
            )


def plan_files(config: ProjectConfig, folders: FolderSet) -> list[FileSpec]:
    """List every file to generate, in write order.

    Folders without a known mapping get no files.  The database connection
    file is only planned when a concrete database was chosen.  A planned
    file that imports from a folder outside *folders* is logged as a warning.
    """
    specs: list[FileSpec] = []
    for folder in folders:
        for file_id in FOLDER_FILES.get(folder, ()):
            if file_id is FileId.DATABASE_CONFIG and config.database is Database.NONE:
                logger.debug("No database selected; not planning %s", FILE_NAMES[file_id])
                continue
            specs.append(FileSpec(file_id=file_id, folder=folder))

    specs.extend(FileSpec(file_id=file_id) for file_id in ROOT_FILES)
    if config.docker_enabled:
        specs.extend(FileSpec(file_id=file_id) for file_id in DOCKER_FILES)
    _warn_missing_imports(config, specs, folders)
    return specs


def summarize(outcomes: list[FileOutcome]) -> dict[OutcomeStatus, int]:
    """Count outcomes per status (every status is present, possibly zero)."""
    counts = Counter(o.status for o in outcomes)
    return {status: counts.get(status, 0) for status in OutcomeStatus}


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


class ProjectMaterializer:
    """Writes a configured project to disk exactly once per path."""

    def __init__(self, config: ProjectConfig, settings: Settings | None = None) -> None:
        self.config = config
        self.settings = settings or Settings()

    # -- Public API --------------------------------------------------------

    def project_root(self, output_dir: str | Path | None = None) -> Path:
        """Path of the project folder inside *output_dir* (default: settings)."""
        parent = Path(output_dir) if output_dir is not None else self.settings.output_dir
        return parent / self.config.name

    def materialize(
        self,
        root_path: str | Path,
        folders: FolderSet | None = None,
    ) -> list[FileOutcome]:
        """Create *root_path* and everything inside it.

        Args:
            root_path: The project root.  Must not exist yet.
            folders: Folder set to create.  Resolved from the configuration
                when omitted.

        Returns:
            One outcome per folder and per file, in creation order.

        Raises:
            ConflictError: If *root_path* already exists.
            ConfigurationError: If the folder set or a template cannot be
                resolved.  Raised before the root is created.
        """
        root = Path(root_path)

        # 1. Abort early if the root is taken
        if root.exists():
            raise ConflictError(root)
        logger.debug("Folder check passed for %s", root)

        if folders is None:
            folders = resolve_folders(self.config, dedupe=self.settings.dedupe_folders)

        # 2. Render everything before touching the disk
        specs = plan_files(self.config, folders)
        contents = [
            render_formatted(spec.file_id, self.config, indent_size=self.settings.indent_size)
            for spec in specs
        ]

        # 3. Root folder
        try:
            root.mkdir(parents=True)
        except FileExistsError as exc:
            raise ConflictError(root) from exc

        # 4. Folder set
        outcomes: list[FileOutcome] = [self._create_folder(root / name) for name in folders]
        logger.debug("Folders created under %s", root)

        # 5. Files (folder files, root files, then Docker files)
        for spec, content in zip(specs, contents):
            target_dir = root / spec.folder if spec.folder else root
            outcomes.append(self._write_file(target_dir / FILE_NAMES[spec.file_id], content))
        logger.debug(
            "Files written under %s%s",
            root,
            " (with Docker files)" if self.config.docker_enabled else "",
        )

        return outcomes

    # -- Filesystem helpers ------------------------------------------------

    def _create_folder(self, path: Path) -> FileOutcome:
        if path.is_dir():
            logger.warning("Skipping existing folder: %s", path)
            return FileOutcome(
                path=path, status=OutcomeStatus.SKIPPED, reason="already exists", is_dir=True
            )
        try:
            path.mkdir(parents=True)
        except FileExistsError:
            logger.error("Cannot create folder %s: a file with that name exists", path)
            return FileOutcome(
                path=path,
                status=OutcomeStatus.FAILED,
                reason="exists and is not a directory",
                is_dir=True,
            )
        except OSError as exc:
            logger.error("Cannot create folder %s: %s", path, exc)
            return FileOutcome(path=path, status=OutcomeStatus.FAILED, reason=str(exc), is_dir=True)
        return FileOutcome(path=path, status=OutcomeStatus.CREATED, is_dir=True)

    def _write_file(self, path: Path, content: str) -> FileOutcome:
        try:
            with path.open("x", encoding="utf-8") as fh:
                fh.write(content)
        except FileExistsError:
            logger.warning("Skipping existing file: %s", path)
            return FileOutcome(path=path, status=OutcomeStatus.SKIPPED, reason="already exists")
        except OSError as exc:
            logger.error("Cannot write %s: %s", path, exc)
            return FileOutcome(path=path, status=OutcomeStatus.FAILED, reason=str(exc))
        return FileOutcome(path=path, status=OutcomeStatus.CREATED)


def materialize(
    config: ProjectConfig,
    folders: FolderSet,
    root_path: str | Path,
    settings: Settings | None = None,
) -> list[FileOutcome]:
    """Functional shortcut for ``ProjectMaterializer(config).materialize(...)``."""
    return ProjectMaterializer(config, settings).materialize(root_path, folders)
