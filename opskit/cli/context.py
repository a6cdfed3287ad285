"""
Click context extension for opskit CLI.

Provides the OpsContext dataclass passed through the Click command chain
via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IToolLocator
from ..services.logging import NullLogger
from ..services.preconditions import PreconditionChecker

if TYPE_CHECKING:
    from ..core.container import ServiceContainer
    from ..core.interfaces.service_manager import IServiceManager
    from ..core.settings import OpsSettings

T = TypeVar("T")


@dataclass
class OpsContext:
    """Extended context passed through Click command chain.

    Created once at CLI startup. Tests build one around a container of
    fakes and hand it to CliRunner via obj=.

    Attributes:
        settings: Merged configuration (file, environment, defaults)
        container: Service container holding the host adapters
    """

    settings: OpsSettings
    container: ServiceContainer

    @classmethod
    def create(cls) -> OpsContext:
        """Load settings and bootstrap the production container."""
        from ..core.bootstrap import bootstrap
        from ..core.settings import load_settings

        settings = load_settings()
        container = bootstrap(settings)
        return cls(settings=settings, container=container)

    def resolve(self, interface: type[T]) -> T:
        """Resolve a capability from the container."""
        return self.container.resolve(interface)

    @property
    def logger(self) -> ILogger:
        logger = self.container.try_resolve(ILogger)  # type: ignore[type-abstract]
        return logger if logger is not None else NullLogger()

    @property
    def checker(self) -> PreconditionChecker:
        locator = self.resolve(IToolLocator)  # type: ignore[type-abstract]
        return PreconditionChecker(locator, self.logger)

    @property
    def service_managers(self) -> list[IServiceManager]:
        """Service managers in preference order."""
        return self.container.get_service_managers()
