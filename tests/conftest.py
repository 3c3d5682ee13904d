"""Shared pytest fixtures for the create-backend-project test suite.

Provides reusable fixtures for:
- Project configurations (the end-to-end PostgreSQL/Docker example and a factory)
- A scripted prompter that replays canned answers
- A clean root logger so caplog sees scaffolder warnings
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

import pytest

from backend_scaffold.scaffolder.models import ProjectConfig


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def demo_config() -> ProjectConfig:
    """The reference project: CommonJS, PostgreSQL, default folders, Docker."""
    return ProjectConfig(
        name="demo-api",
        module_type="commonjs",
        database="PostgreSQL",
        structure_mode="Default",
        docker_enabled=True,
    )


@pytest.fixture
def make_config():
    """Factory for ``ProjectConfig`` with sensible defaults."""

    def _make(**overrides: Any) -> ProjectConfig:
        fields: dict[str, Any] = {"name": "test-project"}
        fields.update(overrides)
        return ProjectConfig(**fields)

    return _make


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "out"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Prompter that replays *answers* in order and records every question."""

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def _next(self, message: str) -> Any:
        self.questions.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected question: {message!r}")
        return self.answers.pop(0)

    def ask(self, message: str, default: Optional[str] = None) -> str:
        return self._next(message)

    def confirm(self, message: str, default: bool = False) -> bool:
        return self._next(message)

    def choose(
        self, message: str, choices: Sequence[str], default: Optional[str] = None
    ) -> str:
        answer = self._next(message)
        assert answer in choices, f"{answer!r} is not one of {list(choices)}"
        return answer


@pytest.fixture
def scripted_prompter():
    """Factory returning a ``ScriptedPrompter`` for the given answers."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Undo handlers/levels installed by ``setup_logging`` during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
