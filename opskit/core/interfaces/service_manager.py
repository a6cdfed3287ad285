"""Service manager interface (svc-check, git-deploy restarts)."""

from abc import ABC, abstractmethod

from opskit.core.models.process import ServiceState


class IServiceManager(ABC):
    """Queries and restarts host services."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Manager identifier, e.g. 'systemd'."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether this manager can be used on this host."""
        pass

    @abstractmethod
    def state(self, service: str) -> ServiceState:
        """
        Report a service's state.

        Raises:
            ExternalToolError: If the manager itself fails
        """
        pass

    @abstractmethod
    def restart(self, service: str) -> None:
        """
        Restart a service.

        Raises:
            ExternalToolError: If the restart command fails
        """
        pass
