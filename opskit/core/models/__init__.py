"""
Domain models for opskit.

Pydantic models and enums shared by the CLI, services and host adapters.
"""

from .base import ImmutableModel, OpsBaseModel
from .command import CommandName, TodoAction
from .config import DefaultsConfig, LoggingConfig
from .process import DiskUsageEntry, ProcessInfo, ProcessResult, ProcessTable, ServiceState
from .reports import DeployReport, RotationFailure, RotationReport

__all__ = [
    "CommandName",
    "DefaultsConfig",
    "DeployReport",
    "DiskUsageEntry",
    "ImmutableModel",
    "LoggingConfig",
    "OpsBaseModel",
    "ProcessInfo",
    "ProcessResult",
    "ProcessTable",
    "RotationFailure",
    "RotationReport",
    "ServiceState",
    "TodoAction",
]
