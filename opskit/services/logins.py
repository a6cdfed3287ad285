"""
Login history report.
"""

from pathlib import Path

from ..core.exceptions import InvalidArgumentError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.logins import ILoginHistory
from .preconditions import PreconditionChecker


class LoginReportService:
    """Fetches the N most recent login records."""

    def __init__(
        self,
        history: ILoginHistory,
        checker: PreconditionChecker,
        logger: ILogger,
    ) -> None:
        self._history = history
        self._checker = checker
        self._logger = logger

    def run(self, count: int, output: Path | None = None) -> str:
        """
        Read the records and optionally save them.

        Returns:
            The records as text
        """
        if count < 1:
            raise InvalidArgumentError("COUNT must be at least 1", argument="COUNT", value=str(count))

        self._checker.require(self._history.tool)
        records = self._history.recent(count)
        self._logger.info("login-tracker: read %d most recent records", count)

        if output is not None:
            output = output.expanduser()
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(records, encoding="utf-8")
            self._logger.info("login-tracker: wrote %s", output)
        return records
