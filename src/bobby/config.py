"""Configuration for Bobby.

Settings Management:
    The module provides both a global singleton and context-based settings:

    1. Global singleton (simple cases):
        set_settings(my_settings)
        settings = get_settings()

    2. Context-based (isolated contexts, tests):
        with SettingsContext(my_settings):
            settings = get_settings()  # Returns my_settings

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (BOBBY_* prefix)
    3. Project config (./.bobby/settings.json)
    4. User config (~/.bobby/settings.json)
    5. .env file
    6. Default values
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Generator, Literal, Tuple, Type

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings as PydanticBaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

__all__ = [
    "BobbySettings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "reload_settings",
]

APP_NAME = "bobby"


def _get_json_config_source(
    settings_cls: Type[PydanticBaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists."""
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class BobbySettings(PydanticBaseSettings):
    """Settings for the Bobby task tracker.

    Settings are loaded from (in order of precedence):
    1. Constructor arguments
    2. Environment variables (BOBBY_ prefix)
    3. Project config (./.bobby/settings.json)
    4. User config (~/.bobby/settings.json)
    5. .env file
    6. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="BOBBY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    workspace_dir: Path = Field(
        default_factory=lambda: Path.home() / f".{APP_NAME}",
        title="Workspace Directory",
        description="Directory holding the task file",
    )
    data_file: Path = Field(
        default=Path("tasks.json"),
        title="Data File",
        description="Task file, relative to the workspace unless absolute",
    )
    persist: bool = Field(
        default=True,
        title="Persist",
        description="Load tasks at startup and save them on exit",
    )
    autosave: bool = Field(
        default=True,
        title="Autosave",
        description="Save after every command that changes the list",
    )
    separator_width: int = Field(
        default=35,
        ge=1,
        le=200,
        title="Separator Width",
        description="Number of dashes in the lines framing each response",
    )

    # Logging configuration
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )

    @field_validator("workspace_dir", "data_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v.expanduser()

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def lowercase(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @property
    def data_path(self) -> Path:
        """Absolute location of the task file."""
        if self.data_file.is_absolute():
            return self.data_file
        return self.workspace_dir / self.data_file

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[PydanticBaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer JSON config files between the environment and .env.

        JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{APP_NAME}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{APP_NAME}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)


# Context variable for settings (takes precedence over global singleton)
_settings_context: ContextVar[BobbySettings | None] = ContextVar(
    "settings_context", default=None
)

_settings_instance: BobbySettings | None = None


def get_settings() -> BobbySettings:
    """Get the current settings instance.

    Resolution order:
    1. Context variable (set via SettingsContext or set_context_settings)
    2. Global singleton (set via set_settings)
    3. Fresh BobbySettings instance (created on first access)
    """
    context_settings = _settings_context.get()
    if context_settings is not None:
        return context_settings

    global _settings_instance
    if _settings_instance is None:
        _settings_instance = BobbySettings()
    return _settings_instance


def set_settings(settings: BobbySettings) -> None:
    """Set the global settings instance."""
    global _settings_instance
    _settings_instance = settings


def set_context_settings(settings: BobbySettings | None) -> Token:
    """Set settings for the current context.

    Returns:
        Token that can be used to reset the context variable.
    """
    return _settings_context.set(settings)


@contextmanager
def SettingsContext(settings: BobbySettings) -> Generator[BobbySettings, None, None]:
    """Context manager for isolated settings.

    Example:
        with SettingsContext(test_settings) as s:
            app = BobbyApp()  # picks up test_settings
    """
    token = _settings_context.set(settings)
    try:
        yield settings
    finally:
        _settings_context.reset(token)


def reload_settings() -> BobbySettings:
    """Reload settings (clears global singleton and context cache)."""
    global _settings_instance
    _settings_instance = None
    _settings_context.set(None)
    return get_settings()
