"""Tests for configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from bobby.config import (
    BobbySettings,
    SettingsContext,
    get_settings,
    reload_settings,
    set_settings,
)


class TestBobbySettings:

    def test_default_values(self, temp_workspace: Path):
        with patch.dict(os.environ, {}, clear=True):
            settings = BobbySettings(workspace_dir=temp_workspace)

        assert settings.persist is True
        assert settings.autosave is True
        assert settings.separator_width == 35
        assert settings.log_level == "warning"
        assert settings.log_format == "console"

    def test_workspace_path_expansion(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = BobbySettings(workspace_dir="~/bobby_test")
        assert settings.workspace_dir == Path.home() / "bobby_test"

    def test_data_path_relative(self, temp_workspace: Path):
        with patch.dict(os.environ, {}, clear=True):
            settings = BobbySettings(workspace_dir=temp_workspace)
        assert settings.data_path == temp_workspace / "tasks.json"

    def test_data_path_absolute(self, temp_workspace: Path, tmp_path: Path):
        target = tmp_path / "elsewhere.json"
        with patch.dict(os.environ, {}, clear=True):
            settings = BobbySettings(workspace_dir=temp_workspace, data_file=target)
        assert settings.data_path == target

    def test_environment_variables(self, temp_workspace: Path):
        env = {
            "BOBBY_AUTOSAVE": "false",
            "BOBBY_SEPARATOR_WIDTH": "10",
            "BOBBY_LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = BobbySettings(workspace_dir=temp_workspace)
        assert settings.autosave is False
        assert settings.separator_width == 10
        assert settings.log_level == "debug"

    def test_separator_width_bounds(self, temp_workspace: Path):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                BobbySettings(workspace_dir=temp_workspace, separator_width=0)


class TestSettingsAccessors:

    def test_set_and_get(self, mock_context):
        assert get_settings() is mock_context.settings

    def test_context_overrides_global(self, mock_context, temp_workspace: Path):
        with patch.dict(os.environ, {}, clear=True):
            other = BobbySettings(workspace_dir=temp_workspace, separator_width=5)
        with SettingsContext(other) as s:
            assert s is other
            assert get_settings() is other
        assert get_settings() is mock_context.settings

    def test_reload_creates_fresh_instance(self, mock_context):
        previous = get_settings()
        set_settings(previous)
        assert reload_settings() is not previous
