"""
CPU threshold report.
"""

from ..core.exceptions import InvalidArgumentError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.processes import IProcessLister
from ..core.models.process import ProcessTable
from .preconditions import PreconditionChecker


class CpuHogService:
    """Finds processes above a CPU percentage."""

    def __init__(
        self,
        lister: IProcessLister,
        checker: PreconditionChecker,
        logger: ILogger,
        limit: int = 50,
    ) -> None:
        self._lister = lister
        self._checker = checker
        self._logger = logger
        self._limit = limit

    def run(self, threshold: float) -> ProcessTable:
        """
        List processes whose %CPU is strictly above threshold.

        Returns:
            The listing header plus at most `limit` rows, busiest first
        """
        if threshold < 0:
            raise InvalidArgumentError(
                "THRESHOLD must not be negative", argument="THRESHOLD", value=str(threshold)
            )

        self._checker.require(self._lister.tool)
        table = self._lister.by_cpu()
        hogs = sorted(
            (p for p in table.processes if p.cpu > threshold),
            key=lambda p: p.cpu,
            reverse=True,
        )
        self._logger.info("cpu-hog: %d process(es) above %.1f%%", len(hogs), threshold)
        return ProcessTable(header=table.header, processes=hogs[: self._limit])
