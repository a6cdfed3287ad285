"""
Dependency injection container for opskit.

Uses dependency-injector for DI with support for:
- Singleton lifetimes
- Factory registration
- Interface-based resolution
- An ordered registry of service managers (first available wins)
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

from .interfaces.service_manager import IServiceManager

T = TypeVar("T")


class ServiceContainer:
    """
    Dependency injection container for opskit.

    Combines dependency-injector's providers with a plugin registry for
    service managers, where more than one implementation can be present
    and preference order matters.
    """

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        """Initialize the container with empty registries."""
        # Dynamic provider storage (interface -> provider)
        self._providers: dict[type, providers.Provider] = {}

        # Service managers in preference order (name -> provider)
        self._service_managers: dict[str, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the global container instance (singleton)."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the global container (for testing)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Core service registration (uses dependency-injector providers)
    # -------------------------------------------------------------------------

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register a singleton service.

        Args:
            interface: The interface type
            implementation: Optional concrete instance
            factory: Optional factory function (for lazy init)
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Resolve a service, returning None if not registered."""
        if interface not in self._providers:
            return None
        return self._providers[interface]()

    # -------------------------------------------------------------------------
    # Service manager registry
    # -------------------------------------------------------------------------

    def register_service_manager(
        self,
        name: str,
        manager: IServiceManager | Callable[[], IServiceManager],
    ) -> None:
        """
        Register a service manager.

        Registration order is preference order.

        Args:
            name: Manager name (e.g., 'systemd', 'pgrep')
            manager: Instance, or factory producing one
        """
        if isinstance(manager, IServiceManager):
            self._service_managers[name] = providers.Object(manager)
        else:
            self._service_managers[name] = providers.Singleton(manager)

    def get_service_managers(self) -> list[IServiceManager]:
        """Get all registered service managers in preference order."""
        return [provider() for provider in self._service_managers.values()]


# -------------------------------------------------------------------------
# Module-level convenience functions
# -------------------------------------------------------------------------


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()

