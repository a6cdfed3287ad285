"""
Backup handler: archive a path into a compressed tarball.
"""

from pathlib import Path

from ..core.exceptions import ExternalToolError, InvalidArgumentError, PathNotFoundError
from ..core.interfaces.archive import IArchiveWriter
from ..core.interfaces.logger import ILogger
from .preconditions import PreconditionChecker


class BackupService:
    """
    Archives SOURCE into DESTINATION.

    The source is checked before anything touches the filesystem, and a
    failed archive never leaves a partial destination file behind.
    """

    def __init__(
        self,
        archiver: IArchiveWriter,
        checker: PreconditionChecker,
        logger: ILogger,
    ) -> None:
        self._archiver = archiver
        self._checker = checker
        self._logger = logger

    def run(self, source: Path, destination: Path) -> Path:
        """
        Create the archive.

        Returns:
            Resolved path of the archive written

        Raises:
            PathNotFoundError: If source does not exist
            InvalidArgumentError: If destination is unusable
            MissingDependencyError: If the archiver is not installed
            ExternalToolError: If archiving fails
        """
        source = source.expanduser()
        if not source.exists():
            self._logger.error("backup: source not found: %s", source)
            raise PathNotFoundError(f"Source does not exist: {source}", path=str(source))

        source = source.resolve()
        destination = destination.expanduser().resolve()

        if not source.name:
            raise InvalidArgumentError("Refusing to archive the filesystem root", argument="SOURCE")
        if destination.is_dir():
            raise InvalidArgumentError(
                f"Destination is a directory: {destination}", argument="DESTINATION"
            )
        if source.is_dir() and destination.is_relative_to(source):
            raise InvalidArgumentError(
                "Destination must not be inside the source directory", argument="DESTINATION"
            )

        self._checker.require(self._archiver.tool)

        destination.parent.mkdir(parents=True, exist_ok=True)
        self._logger.info("backup: archiving %s -> %s", source, destination)
        try:
            self._archiver.create(source, destination)
        except ExternalToolError as e:
            self._logger.error("backup: archive failed: %s", e)
            if destination.exists():
                destination.unlink()
                self._logger.info("backup: removed partial archive %s", destination)
            raise

        self._logger.info("backup: wrote %s", destination)
        return destination
