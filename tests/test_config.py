"""Unit tests for Settings (backend_scaffold.config).

Tests cover:
- Defaults and validation bounds
- from_env with every recognised variable
- Boolean parsing and invalid values
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from backend_scaffold.config import Settings


class TestSettingsDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()
        assert settings.output_dir == Path(".")
        assert settings.indent_size == 2
        assert settings.dedupe_folders is True
        assert settings.log_level == "WARNING"

    @pytest.mark.unit
    @pytest.mark.parametrize("indent", [0, 9])
    def test_indent_bounds(self, indent):
        with pytest.raises(ValidationError):
            Settings(indent_size=indent)

    @pytest.mark.unit
    def test_log_level_normalised(self):
        assert Settings(log_level=" info ").log_level == "INFO"

    @pytest.mark.unit
    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")


class TestSettingsFromEnv:
    @pytest.mark.unit
    def test_empty_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings == Settings()

    @pytest.mark.unit
    def test_reads_all_variables(self, tmp_path):
        env = {
            "BACKEND_SCAFFOLD_OUTPUT_DIR": str(tmp_path),
            "BACKEND_SCAFFOLD_INDENT_SIZE": "4",
            "BACKEND_SCAFFOLD_DEDUPE_FOLDERS": "no",
            "BACKEND_SCAFFOLD_LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.output_dir == tmp_path
        assert settings.indent_size == 4
        assert settings.dedupe_folders is False
        assert settings.log_level == "DEBUG"

    @pytest.mark.unit
    @pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("off", False)])
    def test_boolean_values(self, raw, expected):
        with patch.dict(os.environ, {"BACKEND_SCAFFOLD_DEDUPE_FOLDERS": raw}, clear=True):
            assert Settings.from_env().dedupe_folders is expected

    @pytest.mark.unit
    def test_invalid_boolean(self):
        with patch.dict(os.environ, {"BACKEND_SCAFFOLD_DEDUPE_FOLDERS": "maybe"}, clear=True):
            with pytest.raises(ValueError):
                Settings.from_env()

    @pytest.mark.unit
    def test_invalid_indent(self):
        with patch.dict(os.environ, {"BACKEND_SCAFFOLD_INDENT_SIZE": "wide"}, clear=True):
            with pytest.raises(ValueError):
                Settings.from_env()
