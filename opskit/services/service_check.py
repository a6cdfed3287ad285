"""
Service status check.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.exceptions import InvalidArgumentError, MissingDependencyError, ServiceNotFoundError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.service_manager import IServiceManager
from ..core.models.process import ServiceState


def select_manager(managers: Sequence[IServiceManager]) -> IServiceManager | None:
    """First available manager in preference order, or None."""
    for manager in managers:
        if manager.is_available():
            return manager
    return None


class ServiceCheckService:
    """
    Reports whether a service is active.

    Uses the first available manager (systemd, then the pgrep fallback).
    """

    def __init__(self, managers: Sequence[IServiceManager], logger: ILogger) -> None:
        self._managers = list(managers)
        self._logger = logger

    def check(self, service: str) -> ServiceState:
        """
        Look up a service.

        Returns:
            ServiceState.ACTIVE or ServiceState.INACTIVE

        Raises:
            MissingDependencyError: If no service manager is available
            ServiceNotFoundError: If the manager does not know the service
        """
        if not service.strip() or service.startswith("-"):
            raise InvalidArgumentError(f"Invalid service name: {service!r}", argument="SERVICE")

        manager = select_manager(self._managers)
        if manager is None:
            self._logger.error("svc-check: no service manager available")
            raise MissingDependencyError(
                "systemctl",
                context={"fallback": "pgrep", "tried": [m.name for m in self._managers]},
            )

        state = manager.state(service)
        self._logger.info("svc-check: %s is %s (via %s)", service, state.value, manager.name)
        if state is ServiceState.NOT_FOUND:
            raise ServiceNotFoundError(service)
        return state
