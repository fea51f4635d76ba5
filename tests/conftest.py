"""Shared test fixtures for Bobby tests.

Provides:
- MockContext for isolating tests from global settings and BOBBY_* env vars
- Temporary workspace fixtures
- App fixtures whose console writes to a buffer
"""

import io
import os
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

from bobby.cli.app import BobbyApp
from bobby.config import BobbySettings, reload_settings, set_context_settings, set_settings


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Resetting the global settings singleton
    - Hiding BOBBY_* environment variables
    - Providing a temporary workspace directory

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            workspace = ctx.workspace_dir
    """

    def __init__(self, **settings_kwargs) -> None:
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: BobbySettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()
        workspace_dir = Path(self._temp_dir.name)

        for var in [name for name in os.environ if name.startswith("BOBBY_")]:
            self._original_env[var] = os.environ.pop(var)

        self._settings = BobbySettings(
            workspace_dir=workspace_dir,
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)
        os.environ.update(self._original_env)
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> BobbySettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def workspace_dir(self) -> Path:
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name)


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext(log_level="error") as ctx:
        yield ctx


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Fixture providing a temporary workspace directory."""
    workspace = tmp_path / "workspace"
    workspace.mkdir(parents=True)
    return workspace


@pytest.fixture
def settings(temp_workspace: Path) -> BobbySettings:
    """Settings with a temporary workspace and persistence on."""
    with patch.dict(os.environ, {}, clear=True):
        return BobbySettings(workspace_dir=temp_workspace, log_level="error")


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving everything the app prints."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(file=output, width=120, color_system=None, highlight=False)


@pytest.fixture
def app(settings: BobbySettings, console: Console) -> BobbyApp:
    """App persisting into the temporary workspace."""
    return BobbyApp(settings, console=console)


@pytest.fixture
def memory_app(temp_workspace: Path, console: Console) -> BobbyApp:
    """App with persistence disabled."""
    with patch.dict(os.environ, {}, clear=True):
        settings = BobbySettings(workspace_dir=temp_workspace, persist=False, log_level="error")
    return BobbyApp(settings, console=console)
