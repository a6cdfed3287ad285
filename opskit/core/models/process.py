"""
External process and host-report models.

Provides Pydantic models for results returned by host tool adapters.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field, computed_field

from .base import ImmutableModel


class ProcessResult(ImmutableModel):
    """Outcome of one external program invocation."""

    argv: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        """True if the program exited with status 0."""
        return self.returncode == 0


class ProcessInfo(ImmutableModel):
    """One row of a process listing."""

    pid: int
    user: str
    cpu: float
    mem: float
    command: str
    line: str  # Row exactly as the lister printed it


class ProcessTable(ImmutableModel):
    """A process listing: the header row plus parsed rows, highest CPU first."""

    header: str
    processes: list[ProcessInfo] = Field(default_factory=list)


class DiskUsageEntry(ImmutableModel):
    """Size of one directory entry."""

    path: Path
    size_bytes: int = Field(ge=0)


class ServiceState(str, Enum):
    """State of a service as reported by a service manager."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    NOT_FOUND = "not-found"
