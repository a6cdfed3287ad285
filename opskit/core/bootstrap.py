"""
Application bootstrap for opskit.

Initializes the DI container with the logger, the confirmation gate and
the production host adapters. Called once at CLI startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces import (
    IArchiveWriter,
    ICompressor,
    IConfirmer,
    IDiskUsage,
    IExpressionEvaluator,
    IHostInfo,
    ILogger,
    ILoginHistory,
    IProcessLister,
    IProcessRunner,
    IToolLocator,
    IVCSClient,
)

if TYPE_CHECKING:
    from .settings import OpsSettings

_initialized = False


def bootstrap(settings: OpsSettings) -> ServiceContainer:
    """
    Bootstrap the opskit application.

    Args:
        settings: Loaded settings (log sink path, logging options)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, settings)
    _register_host_adapters(container)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: OpsSettings) -> None:
    """Register logger, process runner, tool locator and confirmation gate."""
    from ..services.confirm import PromptConfirmer
    from ..services.logging import OpsLogger
    from ..services.process import PathToolLocator, SubprocessRunner

    def create_logger() -> ILogger:
        logger = OpsLogger(
            log_file=settings.log_file,
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        )
        if settings.config_error:
            logger.warning("%s; using defaults", settings.config_error)
        return logger

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(IToolLocator, implementation=PathToolLocator())  # type: ignore[type-abstract]
    container.register_singleton(IProcessRunner, implementation=SubprocessRunner())  # type: ignore[type-abstract]
    container.register_singleton(IConfirmer, implementation=PromptConfirmer())  # type: ignore[type-abstract]


def _register_host_adapters(container: ServiceContainer) -> None:
    """Register the adapters that shell out to host tools."""
    from ..plugins.bc import BcEvaluator
    from ..plugins.du import DuDiskUsage
    from ..plugins.git import GitClient
    from ..plugins.gzip import GzipCompressor
    from ..plugins.host import ShellHostInfo
    from ..plugins.last import LastLoginHistory
    from ..plugins.pgrep import ProcessServiceManager
    from ..plugins.ps import PsProcessLister
    from ..plugins.systemd import SystemdServiceManager
    from ..plugins.tar import TarArchiveWriter

    def runner() -> IProcessRunner:
        return container.resolve(IProcessRunner)  # type: ignore[type-abstract]

    def locator() -> IToolLocator:
        return container.resolve(IToolLocator)  # type: ignore[type-abstract]

    def logger() -> ILogger:
        return container.resolve(ILogger)  # type: ignore[type-abstract]

    container.register_singleton(IArchiveWriter, factory=lambda: TarArchiveWriter(runner()))  # type: ignore[type-abstract]
    container.register_singleton(ICompressor, factory=lambda: GzipCompressor(runner()))  # type: ignore[type-abstract]
    container.register_singleton(IDiskUsage, factory=lambda: DuDiskUsage(runner(), logger()))  # type: ignore[type-abstract]
    container.register_singleton(ILoginHistory, factory=lambda: LastLoginHistory(runner()))  # type: ignore[type-abstract]
    container.register_singleton(IProcessLister, factory=lambda: PsProcessLister(runner()))  # type: ignore[type-abstract]
    container.register_singleton(IVCSClient, factory=lambda: GitClient(runner()))  # type: ignore[type-abstract]
    container.register_singleton(IExpressionEvaluator, factory=lambda: BcEvaluator(runner()))  # type: ignore[type-abstract]
    container.register_singleton(IHostInfo, factory=lambda: ShellHostInfo(runner(), locator()))  # type: ignore[type-abstract]

    container.register_service_manager("systemd", lambda: SystemdServiceManager(runner(), locator()))
    container.register_service_manager("pgrep", lambda: ProcessServiceManager(runner(), locator()))


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False
