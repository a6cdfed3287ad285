"""
Disk usage report for the immediate children of a directory.
"""

from pathlib import Path

from ..core.exceptions import InvalidArgumentError, OpsException, PathNotFoundError
from ..core.interfaces.disk import IDiskUsage
from ..core.interfaces.logger import ILogger
from ..core.models.process import DiskUsageEntry
from .preconditions import PreconditionChecker


class DiskReportService:
    """Ranks a directory's entries by size, largest first."""

    def __init__(
        self,
        disk_usage: IDiskUsage,
        checker: PreconditionChecker,
        logger: ILogger,
    ) -> None:
        self._disk_usage = disk_usage
        self._checker = checker
        self._logger = logger

    def run(self, directory: Path, top: int) -> list[DiskUsageEntry]:
        """
        Measure every immediate child of directory.

        Returns:
            At most `top` entries, largest first (ties by path)
        """
        if top < 1:
            raise InvalidArgumentError("--top must be at least 1", argument="--top", value=str(top))

        directory = directory.expanduser()
        if not directory.is_dir():
            self._logger.error("du-report: not a directory: %s", directory)
            raise PathNotFoundError(f"Directory does not exist: {directory}", path=str(directory))

        self._checker.require(self._disk_usage.tool)

        try:
            children = sorted(directory.iterdir())
        except OSError as e:
            raise OpsException(f"Cannot list {directory}: {e.strerror}", cause=e) from e

        entries = self._disk_usage.measure(children)
        entries.sort(key=lambda e: (-e.size_bytes, str(e.path)))
        self._logger.info("du-report: measured %d entries in %s", len(entries), directory)
        return entries[:top]
