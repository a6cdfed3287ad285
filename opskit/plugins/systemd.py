"""
systemd service manager.
"""

from pathlib import Path

from ..core.exceptions import ExternalToolError
from ..core.interfaces.process import IProcessRunner, IToolLocator
from ..core.interfaces.service_manager import IServiceManager
from ..core.models.process import ServiceState

# Present only when systemd is PID 1 (same test as sd_booted(3))
SYSTEMD_RUNTIME_DIR = Path("/run/systemd/system")


class SystemdServiceManager(IServiceManager):
    """
    Service checks through `systemctl`.

    Unknown units are told apart from stopped ones with the unit's
    LoadState, which `systemctl is-active` alone does not expose.
    """

    def __init__(
        self,
        runner: IProcessRunner,
        locator: IToolLocator,
        runtime_dir: Path = SYSTEMD_RUNTIME_DIR,
    ) -> None:
        self._runner = runner
        self._locator = locator
        self._runtime_dir = runtime_dir

    @property
    def name(self) -> str:
        return "systemd"

    def is_available(self) -> bool:
        return self._locator.which("systemctl") is not None and self._runtime_dir.is_dir()

    def state(self, service: str) -> ServiceState:
        load = self._runner.run_checked(
            ["systemctl", "show", "--property=LoadState", "--value", "--", service],
            description=f"systemctl could not look up {service}",
        )
        if load.stdout.strip() == "not-found":
            return ServiceState.NOT_FOUND

        # is-active exits non-zero for anything but "active"; read stdout instead
        active = self._runner.run(["systemctl", "is-active", "--", service])
        status = active.stdout.strip()
        if not status:
            raise ExternalToolError(
                f"systemctl is-active gave no state for {service}",
                argv=active.argv,
                returncode=active.returncode,
                stderr=active.stderr,
            )
        return ServiceState.ACTIVE if status == "active" else ServiceState.INACTIVE

    def restart(self, service: str) -> None:
        self._runner.run_checked(
            ["systemctl", "restart", "--", service],
            description=f"systemctl failed to restart {service}",
        )
