"""
Log rotation: compress stale *.log files in place.
"""

from __future__ import annotations

import os
import stat
import time
from collections.abc import Callable, Iterator
from pathlib import Path

from ..core.exceptions import InvalidArgumentError, OpsException, PathNotFoundError
from ..core.interfaces.compression import ICompressor
from ..core.interfaces.logger import ILogger
from ..core.models.reports import RotationFailure, RotationReport
from .preconditions import PreconditionChecker

SECONDS_PER_DAY = 24 * 60 * 60


class LogRotateService:
    """
    Compresses every *.log file under a directory older than N days.

    A file that fails to compress is logged and reported; the rest of
    the batch still runs.
    """

    def __init__(
        self,
        compressor: ICompressor,
        checker: PreconditionChecker,
        logger: ILogger,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._compressor = compressor
        self._checker = checker
        self._logger = logger
        self._clock = clock

    def run(self, directory: Path, days: int) -> RotationReport:
        """
        Rotate one directory tree.

        Raises:
            PathNotFoundError: If directory does not exist
            MissingDependencyError: If the compressor is not installed
        """
        if days < 0:
            raise InvalidArgumentError("--days must not be negative", argument="--days", value=str(days))

        directory = directory.expanduser()
        if not directory.is_dir():
            self._logger.error("log-rotate: not a directory: %s", directory)
            raise PathNotFoundError(f"Directory does not exist: {directory}", path=str(directory))

        self._checker.require(self._compressor.tool)

        cutoff = self._clock() - days * SECONDS_PER_DAY
        report = RotationReport()
        self._logger.info("log-rotate: scanning %s for *.log older than %d day(s)", directory, days)

        for path in self._candidates(directory, cutoff, report):
            try:
                self._compressor.compress(path)
            except OpsException as e:
                self._logger.error("log-rotate: failed to compress %s: %s", path, e)
                report.failed.append(RotationFailure(path=path, error=str(e)))
                continue
            self._logger.info("log-rotate: compressed %s", path)
            report.compressed.append(path)

        self._logger.info("log-rotate: %s", report.summary())
        return report

    def _candidates(self, directory: Path, cutoff: float, report: RotationReport) -> Iterator[Path]:
        """Yield stale regular *.log files, recording ones already rotated as skipped."""
        for root, dirs, files in os.walk(directory, onerror=self._walk_error):
            dirs.sort()
            for name in sorted(files):
                if not name.endswith(".log"):
                    continue
                path = Path(root) / name
                try:
                    info = path.lstat()
                except OSError as e:
                    self._logger.warning("log-rotate: cannot stat %s: %s", path, e)
                    continue
                if not stat.S_ISREG(info.st_mode) or info.st_mtime >= cutoff:
                    continue
                if path.with_name(name + self._compressor.suffix).exists():
                    self._logger.warning("log-rotate: %s%s already exists, skipping", path, self._compressor.suffix)
                    report.skipped.append(path)
                    continue
                yield path

    def _walk_error(self, error: OSError) -> None:
        self._logger.warning("log-rotate: cannot read %s: %s", error.filename, error.strerror)
