"""Directory usage interface (du-report)."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from opskit.core.models.process import DiskUsageEntry


class IDiskUsage(ABC):
    """Measures on-disk size of files and directories."""

    tool: str = "du"

    @abstractmethod
    def measure(self, paths: Sequence[Path]) -> list[DiskUsageEntry]:
        """
        Measure each path, including everything below it.

        Raises:
            ExternalToolError: If the measuring tool fails
        """
        pass
