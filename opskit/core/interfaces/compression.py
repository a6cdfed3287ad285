"""Single-file compressor interface (log rotation)."""

from abc import ABC, abstractmethod
from pathlib import Path


class ICompressor(ABC):
    """Compresses a file in place."""

    tool: str = "gzip"
    suffix: str = ".gz"

    @abstractmethod
    def compress(self, path: Path) -> Path:
        """
        Replace path with its compressed form.

        Returns:
            Path of the compressed file

        Raises:
            ExternalToolError: If compression fails
        """
        pass
