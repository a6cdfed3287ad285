"""
Pydantic Settings for opskit configuration.

Provides settings loading from a TOML file, environment variables, and defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field, PrivateAttr, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import ConfigurationError
from .models.config import DefaultsConfig, LoggingConfig

CONFIG_ENV_VAR = "OPSKIT_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/opskit/config.toml")


def find_config_file() -> Path | None:
    """
    Locate the TOML config file.

    $OPSKIT_CONFIG wins when set (even if the file is missing, so the
    error surfaces); otherwise ~/.config/opskit/config.toml if it exists.

    Returns:
        Path to config file, or None if there is none.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.exists():
        return default
    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from the TOML config file."""

    def __init__(self, settings_cls: type[BaseSettings], config_path: Path | None = None):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._data: dict[str, Any] | None = None
        self.config_file: Path | None = None
        self.error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path or find_config_file()
        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                self._data = tomllib.load(f)
            self.config_file = path
        except tomllib.TOMLDecodeError as e:
            self.error = f"Failed to parse config file {path}: {e}"
        except OSError as e:
            self.error = f"Failed to read config file {path}: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return dict(self._load_toml())


class OpsSettings(BaseSettings):
    """opskit configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (OPSKIT_<field>, OPSKIT_<section>__<field>)
    3. TOML config file ($OPSKIT_CONFIG or ~/.config/opskit/config.toml)
    4. Model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="OPSKIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_file: Path = Path("opskit.log")
    todo_file: Path = Field(default_factory=lambda: Path.home() / ".opskit_todo")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)

    _config_file: Path | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @field_validator("log_file", "todo_file")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        """Expand a leading ~ in path settings."""
        return v.expanduser()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading."""
        return (
            init_settings,
            env_settings,
            TomlConfigSource(settings_cls),
        )

    @property
    def config_file(self) -> Path | None:
        """Config file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the config file was ignored, if it was."""
        return self._config_error


class _EnvOnlySettings(OpsSettings):
    """OpsSettings without the TOML source, used when the file holds bad values."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings)


def _describe_errors(error: ValidationError) -> str:
    """Render validation errors as 'section.field (reason)' items."""
    return ", ".join(
        f"{'.'.join(str(part) for part in err['loc'])} ({err['msg']})" for err in error.errors()
    )


def load_settings(**overrides: Any) -> OpsSettings:
    """Load opskit settings from config file and environment.

    A config file that fails to parse or holds invalid values is ignored
    and reported through config_error. Invalid environment or explicit
    values cannot be ignored.

    Args:
        **overrides: Explicit values that beat every other source

    Returns:
        OpsSettings instance with all sources merged

    Raises:
        ConfigurationError: If environment or explicit values are invalid
    """
    # Read the file source up front to report where settings came from
    toml_source = TomlConfigSource(OpsSettings)
    toml_source()
    config_error = toml_source.error

    try:
        settings = OpsSettings(**overrides)
    except ValidationError as e:
        if toml_source.config_file is None:
            raise ConfigurationError(_describe_errors(e)) from e
        try:
            settings = _EnvOnlySettings(**overrides)
        except ValidationError as env_error:
            raise ConfigurationError(_describe_errors(env_error)) from env_error
        config_error = f"Invalid values in config file {toml_source.config_file}: {_describe_errors(e)}"

    settings._config_file = toml_source.config_file
    settings._config_error = config_error
    return settings
