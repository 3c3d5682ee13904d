"""Tests for the interactive question flow."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from backend_scaffold.prompts import RichPrompter, ask_project_config
from backend_scaffold.scaffolder.models import Database, ModuleType, StructureMode

pytestmark = pytest.mark.unit


class TestAskProjectConfig:
    def test_full_default_conversation(self, scripted_prompter):
        prompter = scripted_prompter(
            ["shop", False, False, "commonjs", "Default", "MongoDB", True]
        )
        config = ask_project_config(prompter)

        assert config.name == "shop"
        assert config.description == ""
        assert config.module_type is ModuleType.COMMONJS
        assert config.structure_mode is StructureMode.DEFAULT
        assert config.database is Database.MONGODB
        assert config.docker_enabled is True
        assert prompter.questions == [
            "Project name",
            "Do you want to add a description?",
            "Do you want to add an author name?",
            "Project type",
            "Choose folder structure setup",
            "Choose a database",
            "Do you want to add Docker support?",
        ]

    def test_optional_questions_follow_confirmation(self, scripted_prompter):
        prompter = scripted_prompter(
            ["shop", True, "An API", True, "Sam", "module", "Default", "None", False]
        )
        config = ask_project_config(prompter)
        assert config.description == "An API"
        assert config.author == "Sam"
        assert "Project description" in prompter.questions
        assert "Project author" in prompter.questions

    def test_custom_folders_asked_only_in_custom_mode(self, scripted_prompter):
        prompter = scripted_prompter(
            ["shop", False, False, "commonjs", "Custom", "a, b, , c", "None", False]
        )
        config = ask_project_config(prompter)
        assert config.structure_mode is StructureMode.CUSTOM
        assert config.custom_folder_names == ("a", "b", "c")

    def test_blank_answers_are_asked_again(self, scripted_prompter):
        prompter = scripted_prompter(
            ["  ", "shop", False, False, "commonjs", "Custom", " , ", "api", "None", False]
        )
        with patch("backend_scaffold.prompts.print_warning") as warn:
            config = ask_project_config(prompter)
        assert config.name == "shop"
        assert config.custom_folder_names == ("api",)
        assert prompter.questions.count("Project name") == 2
        assert warn.call_count == 2

    def test_preset_answers_are_not_asked(self, scripted_prompter):
        prompter = scripted_prompter(["module"])
        config = ask_project_config(
            prompter,
            {
                "name": "shop",
                "description": "",
                "author": "",
                "structure_mode": "Default",
                "database": "PostgreSQL",
                "docker_enabled": False,
            },
        )
        assert prompter.questions == ["Project type"]
        assert config.module_type is ModuleType.ESM
        assert config.database is Database.POSTGRESQL

    def test_preset_custom_folders_skip_folder_question(self, scripted_prompter):
        prompter = scripted_prompter(["None", False])
        config = ask_project_config(
            prompter,
            {
                "name": "shop",
                "description": "",
                "author": "",
                "module_type": "commonjs",
                "structure_mode": "Custom",
                "custom_folder_names": ("routes",),
            },
        )
        assert config.custom_folder_names == ("routes",)
        assert prompter.questions == ["Choose a database", "Do you want to add Docker support?"]


class TestRichPrompter:
    def test_choose_passes_choices(self):
        prompter = RichPrompter()
        with patch("backend_scaffold.prompts.Prompt.ask", return_value="MySQL") as ask:
            answer = prompter.choose("Choose a database", ["MongoDB", "MySQL"])
        assert answer == "MySQL"
        assert ask.call_args.kwargs["choices"] == ["MongoDB", "MySQL"]
        assert ask.call_args.kwargs["default"] == "MongoDB"

    def test_ask_returns_empty_string_for_none(self):
        prompter = RichPrompter()
        with patch("backend_scaffold.prompts.Prompt.ask", return_value=None):
            assert prompter.ask("Project name") == ""

    def test_confirm(self):
        prompter = RichPrompter()
        with patch("backend_scaffold.prompts.Confirm.ask", return_value=True) as ask:
            assert prompter.confirm("Docker?", default=False) is True
        assert ask.call_args.kwargs["default"] is False
