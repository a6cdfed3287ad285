"""
Configuration models.

Provides Pydantic models for opskit configuration sections with validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import OpsBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(OpsBaseModel):
    """Base model for config sections with relaxed strict mode for TOML/env loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env strings
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "info"
    console: bool = False
    file: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept upper-case level names from the environment."""
        return v.lower() if isinstance(v, str) else v


class DefaultsConfig(ConfigBaseModel):
    """Per-command defaults used when an optional argument is omitted."""

    login_count: Annotated[int, Field(ge=1)] = 50
    du_top: Annotated[int, Field(ge=1)] = 10
    cpu_threshold: Annotated[float, Field(ge=0)] = 30.0
    cpu_limit: Annotated[int, Field(ge=1)] = 50
    report_processes: Annotated[int, Field(ge=1)] = 20
    log_dir: Path = Path("/var/log")
    log_age_days: Annotated[int, Field(ge=0)] = 7
    deploy_branch: Annotated[str, Field(min_length=1)] = "main"
    deploy_hook: Annotated[str, Field(min_length=1)] = "deploy.sh"
    calc_scale: Annotated[int, Field(ge=0, le=50)] = 6

    @field_validator("deploy_hook")
    @classmethod
    def hook_is_relative(cls, v: str) -> str:
        """The hook lives inside the repository."""
        if Path(v).is_absolute() or ".." in Path(v).parts:
            raise ValueError("deploy_hook must be a path relative to the repository root")
        return v
