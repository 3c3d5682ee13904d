"""Command-line entry point for create-backend-project.

Usage::

    create-backend-project
    create-backend-project --name demo-api --database PostgreSQL --docker -y
    python -m backend_scaffold --name shop --folders "routes, services" -o ./work

Answers given as flags are not asked again; ``--yes`` skips every remaining
question and uses the defaults.  Exit status is 0 on success and 1 for any
aborted or partially failed run.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from backend_scaffold import __version__
from backend_scaffold.config import Settings
from backend_scaffold.errors import ScaffoldError
from backend_scaffold.prompts import Prompter, RichPrompter, ask_project_config
from backend_scaffold.scaffolder.folders import parse_folder_list
from backend_scaffold.scaffolder.materializer import ProjectMaterializer, summarize
from backend_scaffold.scaffolder.models import (
    Database,
    FileOutcome,
    ModuleType,
    OutcomeStatus,
    ProjectConfig,
    StructureMode,
)
from backend_scaffold.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    setup_logging,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-backend-project",
        description="Quick setup for Node.js backend projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-backend-project\n"
            "  create-backend-project --name demo-api --database PostgreSQL --docker -y\n"
            "  create-backend-project --name shop --folders 'routes, services' -o ./work\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--name", help="Project name (also the folder name)")
    parser.add_argument("--description", help="Project description")
    parser.add_argument("--author", help="Project author")
    parser.add_argument(
        "--module-type",
        choices=[m.value for m in ModuleType],
        help="Module system of the generated code",
    )
    parser.add_argument(
        "--database",
        choices=[d.value for d in Database],
        help="Database driver to include",
    )
    parser.add_argument(
        "--structure",
        choices=[s.value for s in StructureMode],
        help="Folder structure setup (implied Custom when --folders is given)",
    )
    parser.add_argument(
        "--folders",
        help="Comma-separated custom folder names (forces Custom structure)",
    )
    parser.add_argument(
        "--docker",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add a Dockerfile and docker-compose.yml",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--keep-duplicate-folders",
        action="store_true",
        help="Do not collapse repeated custom folder names",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Do not prompt; use defaults for anything not given as a flag",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    return parser


def _preset_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the answers that were given as flags."""
    preset: dict[str, Any] = {}
    for flag, field in (
        ("name", "name"),
        ("description", "description"),
        ("author", "author"),
        ("module_type", "module_type"),
        ("database", "database"),
        ("structure", "structure_mode"),
        ("docker", "docker_enabled"),
    ):
        value = getattr(args, flag)
        if value is not None:
            preset[field] = value
    if args.folders is not None:
        preset["structure_mode"] = StructureMode.CUSTOM.value
        preset["custom_folder_names"] = parse_folder_list(args.folders)
    return preset


def _build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    updates: dict[str, Any] = {}
    if args.output is not None:
        updates["output_dir"] = Path(args.output)
    if args.keep_duplicate_folders:
        updates["dedupe_folders"] = False
    if args.verbose:
        updates["log_level"] = "DEBUG"
    return settings.model_copy(update=updates)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "Invalid project configuration: " + "; ".join(parts)


def _report(config: ProjectConfig, root: Path, outcomes: list[FileOutcome]) -> bool:
    """Print the run summary.  Returns ``True`` when nothing failed."""
    counts = summarize(outcomes)
    print_summary_table(
        {
            "Project": config.name,
            "Location": str(root),
            "Created": str(counts[OutcomeStatus.CREATED]),
            "Skipped": str(counts[OutcomeStatus.SKIPPED]),
            "Failed": str(counts[OutcomeStatus.FAILED]),
        },
        title="Scaffold summary",
    )
    for outcome in outcomes:
        if outcome.status is OutcomeStatus.SKIPPED:
            print_warning(f"Skipped {outcome.path}: {outcome.reason}")
        elif outcome.status is OutcomeStatus.FAILED:
            print_error(f"Failed {outcome.path}: {outcome.reason}")
    return counts[OutcomeStatus.FAILED] == 0


def main(argv: Optional[list[str]] = None, prompter: Optional[Prompter] = None) -> int:
    """CLI entry point.  Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.folders is not None and args.structure == StructureMode.DEFAULT.value:
        parser.error("--folders cannot be combined with --structure Default")

    try:
        settings = _build_settings(args)
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid settings: {exc}")
        return EXIT_FAILURE
    setup_logging(settings.log_level)

    preset = _preset_from_args(args)
    try:
        if args.yes:
            config = ProjectConfig(**preset)
        else:
            config = ask_project_config(prompter or RichPrompter(), preset)

        materializer = ProjectMaterializer(config, settings)
        root = materializer.project_root()
        outcomes = materializer.materialize(root)
    except ValidationError as exc:
        print_error(_format_validation_error(exc))
        return EXIT_FAILURE
    except ScaffoldError as exc:
        print_error(str(exc))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print_warning("Aborted.")
        return EXIT_INTERRUPTED

    if not _report(config, root, outcomes):
        print_error(f'Project "{config.name}" was created with errors.')
        return EXIT_FAILURE

    print_success(f'Project "{config.name}" is ready!')
    console.print(f"\nNext steps:\n  cd {root}\n  npm install\n  npm run dev\n", markup=False)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
