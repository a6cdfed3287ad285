"""Archive writer interface (backup)."""

from abc import ABC, abstractmethod
from pathlib import Path


class IArchiveWriter(ABC):
    """Writes compressed archives."""

    tool: str = "tar"

    @abstractmethod
    def create(self, source: Path, destination: Path) -> None:
        """
        Archive source into destination.

        Entries are stored relative to source's parent directory, never as
        absolute paths.

        Raises:
            ExternalToolError: If the archiver fails
        """
        pass
