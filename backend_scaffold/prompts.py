"""Interactive question flow that produces a ``ProjectConfig``.

Questions are asked strictly in order and some only appear depending on an
earlier answer (the description is only asked after "add a description?",
custom folders only in Custom mode).  Answers already supplied on the
command line are passed in as *preset* and never asked again.

The prompter is injected so tests can script the conversation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from backend_scaffold.scaffolder.folders import parse_folder_list
from backend_scaffold.scaffolder.models import Database, ModuleType, ProjectConfig, StructureMode
from backend_scaffold.utils import console as default_console
from backend_scaffold.utils import print_warning


class Prompter(Protocol):
    """Minimal question/answer interface used by :func:`ask_project_config`."""

    def ask(self, message: str, default: Optional[str] = None) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def choose(
        self, message: str, choices: Sequence[str], default: Optional[str] = None
    ) -> str: ...


class RichPrompter:
    """Prompter backed by ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask(self, message: str, default: Optional[str] = None) -> str:
        if default is None:
            answer = Prompt.ask(message, console=self.console)
        else:
            answer = Prompt.ask(message, default=default, console=self.console)
        return answer or ""

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, default=default, console=self.console)

    def choose(
        self, message: str, choices: Sequence[str], default: Optional[str] = None
    ) -> str:
        return Prompt.ask(
            message,
            choices=list(choices),
            default=default if default is not None else choices[0],
            console=self.console,
        )


def ask_project_config(
    prompter: Prompter, preset: dict[str, Any] | None = None
) -> ProjectConfig:
    """Ask for every answer missing from *preset* and build the config.

    Args:
        prompter: Question/answer backend.
        preset: Answers already known, keyed by ``ProjectConfig`` field name.

    Returns:
        A validated ``ProjectConfig``.
    """
    answers: dict[str, Any] = dict(preset or {})

    if not str(answers.get("name") or "").strip():
        answers["name"] = _ask_until(
            lambda: prompter.ask("Project name").strip(),
            "Project name is required.",
        )

    if "description" not in answers:
        answers["description"] = (
            prompter.ask("Project description")
            if prompter.confirm("Do you want to add a description?", default=False)
            else ""
        )

    if "author" not in answers:
        answers["author"] = (
            prompter.ask("Project author")
            if prompter.confirm("Do you want to add an author name?", default=False)
            else ""
        )

    if "module_type" not in answers:
        answers["module_type"] = prompter.choose(
            "Project type",
            [m.value for m in ModuleType],
            default=ModuleType.COMMONJS.value,
        )

    if "structure_mode" not in answers:
        answers["structure_mode"] = prompter.choose(
            "Choose folder structure setup",
            [s.value for s in StructureMode],
            default=StructureMode.DEFAULT.value,
        )

    if StructureMode(answers["structure_mode"]) is StructureMode.CUSTOM and not answers.get(
        "custom_folder_names"
    ):
        answers["custom_folder_names"] = _ask_until(
            lambda: parse_folder_list(prompter.ask("Enter folder names separated by commas")),
            "Enter at least one folder name.",
        )

    if "database" not in answers:
        answers["database"] = prompter.choose(
            "Choose a database",
            [d.value for d in Database],
            default=Database.NONE.value,
        )

    if "docker_enabled" not in answers:
        answers["docker_enabled"] = prompter.confirm(
            "Do you want to add Docker support?", default=False
        )

    return ProjectConfig(**answers)


def _ask_until(question, retry_message: str):
    """Repeat *question* until it returns something truthy."""
    while True:
        answer = question()
        if answer:
            return answer
        print_warning(retry_message)
