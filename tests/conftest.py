"""
Shared pytest fixtures for opskit tests.

- isolated_environment: keeps the log sink, todo store and config in tmp_path
- checker / logger / locator: precondition plumbing over fakes
- ops_ctx: OpsContext over a fresh container holding only fakes
"""

from __future__ import annotations

from pathlib import Path

import pytest

from opskit.cli.context import OpsContext
from opskit.core import bootstrap as bootstrap_module
from opskit.core.container import ServiceContainer
from opskit.core.interfaces import (
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
from opskit.core.models.process import ServiceState
from opskit.core.settings import load_settings
from opskit.services.confirm import StaticConfirmer
from opskit.services.preconditions import PreconditionChecker

from .fakes import (
    FakeArchiveWriter,
    FakeCompressor,
    FakeDiskUsage,
    FakeEvaluator,
    FakeHostInfo,
    FakeLocator,
    FakeLoginHistory,
    FakeProcessLister,
    FakeRunner,
    FakeServiceManager,
    FakeVCS,
    RecordingLogger,
    make_process,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: runs real host tools")


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep the log sink, todo store and config file inside tmp_path."""
    monkeypatch.setenv("OPSKIT_LOG_FILE", str(tmp_path / "opskit.log"))
    monkeypatch.setenv("OPSKIT_TODO_FILE", str(tmp_path / "todo.txt"))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("OPSKIT_CONFIG", raising=False)
    bootstrap_module.reset()
    yield
    bootstrap_module.reset()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def locator() -> FakeLocator:
    return FakeLocator()


@pytest.fixture
def checker(locator: FakeLocator, logger: RecordingLogger) -> PreconditionChecker:
    return PreconditionChecker(locator, logger)


@pytest.fixture
def fakes() -> dict:
    """One instance of every fake adapter, keyed by interface."""
    return {
        IArchiveWriter: FakeArchiveWriter(),
        ICompressor: FakeCompressor(),
        IDiskUsage: FakeDiskUsage(),
        ILoginHistory: FakeLoginHistory(),
        IProcessLister: FakeProcessLister([make_process(101, 85.0, "python train.py"), make_process(7, 0.3, "sshd")]),
        IVCSClient: FakeVCS(),
        IExpressionEvaluator: FakeEvaluator(),
        IHostInfo: FakeHostInfo(),
        IProcessRunner: FakeRunner(),
        IConfirmer: StaticConfirmer(True),
    }


@pytest.fixture
def service_managers() -> list[FakeServiceManager]:
    return [
        FakeServiceManager(
            "systemd",
            states={"nginx": ServiceState.ACTIVE, "cron": ServiceState.INACTIVE},
        )
    ]


@pytest.fixture
def ops_ctx(fakes, service_managers, locator, logger) -> OpsContext:
    """OpsContext whose container holds only fakes."""
    container = ServiceContainer()
    container.register_singleton(ILogger, implementation=logger)
    container.register_singleton(IToolLocator, implementation=locator)
    for interface, fake in fakes.items():
        container.register_singleton(interface, implementation=fake)
    for manager in service_managers:
        container.register_service_manager(manager.name, manager)
    return OpsContext(settings=load_settings(), container=container)
