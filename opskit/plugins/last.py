"""
Login history via `last`.
"""

from ..core.interfaces.logins import ILoginHistory
from ..core.interfaces.process import IProcessRunner


class LastLoginHistory(ILoginHistory):
    """Reads wtmp records with `last -n COUNT`."""

    def __init__(self, runner: IProcessRunner) -> None:
        self._runner = runner

    def recent(self, count: int) -> str:
        result = self._runner.run_checked(
            ["last", "-n", str(count)],
            description="last failed to read login records",
        )
        return result.stdout
