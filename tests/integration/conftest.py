"""Integration test fixtures: real host tools, skipped when absent."""

import shutil
import subprocess
from pathlib import Path

import pytest

from opskit.core.interfaces.logger import ILogger
from opskit.services.logging import NullLogger
from opskit.services.preconditions import PreconditionChecker
from opskit.services.process import PathToolLocator, SubprocessRunner


def require_tool(name: str) -> None:
    if shutil.which(name) is None:
        pytest.skip(f"{name} not installed")


@pytest.fixture
def real_runner() -> SubprocessRunner:
    return SubprocessRunner()


@pytest.fixture
def null_logger() -> ILogger:
    return NullLogger()


@pytest.fixture
def real_checker(null_logger) -> PreconditionChecker:
    return PreconditionChecker(PathToolLocator(), null_logger)


def git(*args: str, cwd: Path) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout


@pytest.fixture
def deploy_repos(tmp_path: Path) -> tuple[Path, Path]:
    """
    An upstream repository and a clone of it.

    Returns:
        (upstream, clone)
    """
    require_tool("git")
    upstream = tmp_path / "upstream"
    upstream.mkdir()
    git("init", "-b", "main", cwd=upstream)
    git("config", "user.email", "test@example.com", cwd=upstream)
    git("config", "user.name", "Test User", cwd=upstream)
    (upstream / "app.txt").write_text("v1\n")
    git("add", "app.txt", cwd=upstream)
    git("commit", "-m", "v1", cwd=upstream)

    clone = tmp_path / "clone"
    git("clone", str(upstream), str(clone), cwd=tmp_path)
    git("config", "user.email", "test@example.com", cwd=clone)
    git("config", "user.name", "Test User", cwd=clone)
    return upstream, clone
