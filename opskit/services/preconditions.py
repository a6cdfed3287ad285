"""
Precondition checks run before a command mutates anything.
"""

from ..core.exceptions import MissingDependencyError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IToolLocator


class PreconditionChecker:
    """
    Verifies host executables are resolvable on PATH.

    Usage:
        checker = PreconditionChecker(locator, logger)
        checker.require("tar")
    """

    def __init__(self, locator: IToolLocator, logger: ILogger) -> None:
        self._locator = locator
        self._logger = logger

    def require(self, *tools: str) -> None:
        """
        Succeed silently if every tool is on PATH.

        Raises:
            MissingDependencyError: Naming the first missing tool
        """
        for tool in tools:
            if self._locator.which(tool) is None:
                self._logger.error("Missing dependency: %s", tool)
                raise MissingDependencyError(tool)
