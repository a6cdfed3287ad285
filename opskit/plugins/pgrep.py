"""
Process-name fallback used when no service manager is running.
"""

from ..core.exceptions import ExternalToolError
from ..core.interfaces.process import IProcessRunner, IToolLocator
from ..core.interfaces.service_manager import IServiceManager
from ..core.models.process import ServiceState


class ProcessServiceManager(IServiceManager):
    """
    Treats a service as active when a process with exactly its name runs.

    It cannot tell an unknown service from a stopped one, and cannot
    restart anything.
    """

    def __init__(self, runner: IProcessRunner, locator: IToolLocator) -> None:
        self._runner = runner
        self._locator = locator

    @property
    def name(self) -> str:
        return "pgrep"

    def is_available(self) -> bool:
        return self._locator.which("pgrep") is not None

    def state(self, service: str) -> ServiceState:
        result = self._runner.run(["pgrep", "-x", "--", service])
        if result.returncode == 0:
            return ServiceState.ACTIVE
        if result.returncode == 1:
            return ServiceState.INACTIVE
        raise ExternalToolError(
            f"pgrep failed while checking {service}",
            argv=result.argv,
            returncode=result.returncode,
            stderr=result.stderr,
        )

    def restart(self, service: str) -> None:
        raise ExternalToolError(f"Cannot restart {service}: no service manager is running")
