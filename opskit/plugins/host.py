"""
Host facts for the system snapshot.
"""

import socket

from ..core.exceptions import MissingDependencyError
from ..core.interfaces.host import IHostInfo
from ..core.interfaces.process import IProcessRunner, IToolLocator


class ShellHostInfo(IHostInfo):
    """Reads uptime, memory and disk usage from the usual procps/coreutils tools."""

    def __init__(self, runner: IProcessRunner, locator: IToolLocator) -> None:
        self._runner = runner
        self._locator = locator

    def hostname(self) -> str:
        return socket.gethostname()

    def uptime(self) -> str:
        if self._locator.which("uptime") is None:
            raise MissingDependencyError("uptime")
        # -p is procps-only; plain uptime works everywhere
        pretty = self._runner.run(["uptime", "-p"])
        if pretty.ok and pretty.stdout.strip():
            return pretty.stdout.strip()
        return self._runner.run_checked(["uptime"], description="uptime failed").stdout.strip()

    def memory(self) -> str:
        return self._runner.run_checked(["free", "-h"], description="free failed").stdout.rstrip()

    def disk(self) -> str:
        return self._runner.run_checked(["df", "-h"], description="df failed").stdout.rstrip()
