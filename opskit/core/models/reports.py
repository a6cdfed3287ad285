"""
Handler result models.

Batch and multi-step handlers return one of these so the CLI layer can
render the outcome without re-deriving it.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, computed_field

from .base import OpsBaseModel


class RotationFailure(OpsBaseModel):
    """A log file that could not be compressed."""

    path: Path
    error: str


class RotationReport(OpsBaseModel):
    """Outcome of a log-rotate batch."""

    compressed: list[Path] = Field(default_factory=list)
    failed: list[RotationFailure] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)

    def summary(self) -> str:
        """One-line summary of the batch."""
        return (
            f"Compressed {len(self.compressed)} file(s), "
            f"{len(self.failed)} failed, {len(self.skipped)} skipped"
        )


class DeployReport(OpsBaseModel):
    """Outcome of a git deploy."""

    branch: str
    commit: str | None = None
    hook_ran: bool = False
    hook_output: str = ""
    restarted: str | None = None
    restart_verified: bool = False
    warnings: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def short_commit(self) -> str | None:
        """Short form of the deployed commit hash."""
        return self.commit[:7] if self.commit else None
