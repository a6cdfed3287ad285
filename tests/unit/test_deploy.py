"""
Unit tests for git-deploy.

Tests verify:
- A dirty tree fails with no fetch, checkout or pull
- The hook runs only when present and executable
- Restart problems are warnings, not failures
"""

import pytest

from opskit.core.exceptions import (
    DeployHookError,
    DirtyWorkTreeError,
    ExternalToolError,
    InvalidArgumentError,
    MissingDependencyError,
    NotARepositoryError,
)
from opskit.core.models.process import ServiceState
from opskit.services.deploy import DeployService
from opskit.services.preconditions import PreconditionChecker

from ..fakes import FakeLocator, FakeRunner, FakeServiceManager, FakeVCS


@pytest.fixture
def repo(tmp_path):
    root = tmp_path / "app"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def runner():
    return FakeRunner()


def make_deployer(vcs, checker, logger, runner=None, managers=()):
    return DeployService(vcs, list(managers), runner or FakeRunner(), checker, logger)


def add_hook(repo, executable=True):
    hook = repo / "deploy.sh"
    hook.write_text("#!/bin/sh\necho deployed\n")
    hook.chmod(0o755 if executable else 0o644)
    return hook


class TestDeployPreconditions:
    def test_dirty_tree_stops_before_fetch(self, repo, checker, logger):
        vcs = FakeVCS(changes=[" M app.py", "?? notes.txt"])

        with pytest.raises(DirtyWorkTreeError) as exc_info:
            make_deployer(vcs, checker, logger).deploy(repo)

        assert exc_info.value.exit_code == 5
        assert vcs.calls == ["status"]
        assert "M app.py" in str(exc_info.value)

    def test_dirty_tree_lists_at_most_five_changes(self, repo, checker, logger):
        vcs = FakeVCS(changes=[f"?? file{i}" for i in range(8)])
        with pytest.raises(DirtyWorkTreeError) as exc_info:
            make_deployer(vcs, checker, logger).deploy(repo)
        assert "... and 3 more" in exc_info.value.message

    def test_not_a_repository(self, tmp_path, checker, logger):
        plain = tmp_path / "plain"
        plain.mkdir()
        with pytest.raises(NotARepositoryError) as exc_info:
            make_deployer(FakeVCS(), checker, logger).deploy(plain)
        assert exc_info.value.exit_code == 4

    def test_missing_directory(self, tmp_path, checker, logger):
        with pytest.raises(NotARepositoryError):
            make_deployer(FakeVCS(), checker, logger).deploy(tmp_path / "missing")

    def test_requires_git(self, repo, logger):
        vcs = FakeVCS()
        checker = PreconditionChecker(FakeLocator(tools=()), logger)
        with pytest.raises(MissingDependencyError, match="git"):
            make_deployer(vcs, checker, logger).deploy(repo)
        assert vcs.calls == []

    def test_option_like_branch_rejected(self, repo, checker, logger):
        with pytest.raises(InvalidArgumentError):
            make_deployer(FakeVCS(), checker, logger).deploy(repo, branch="--force")


class TestDeployUpdate:
    def test_fetch_checkout_pull_in_order(self, repo, checker, logger):
        vcs = FakeVCS()
        report = make_deployer(vcs, checker, logger).deploy(repo, branch="release")

        assert vcs.calls == ["status", "fetch", "checkout", "pull"]
        assert report.branch == "release"
        assert report.short_commit == "0123456"
        assert report.hook_ran is False

    def test_pull_failure_propagates(self, repo, checker, logger):
        vcs = FakeVCS()
        vcs.fail_on = "pull"
        with pytest.raises(ExternalToolError, match="pull exploded"):
            make_deployer(vcs, checker, logger).deploy(repo)


class TestDeployHook:
    def test_executable_hook_runs_in_repo(self, repo, checker, logger, runner):
        hook = add_hook(repo)
        runner.script([str(hook.resolve())], stdout="deployed\n")

        report = make_deployer(FakeVCS(), checker, logger, runner).deploy(repo)

        assert report.hook_ran is True
        assert report.hook_output == "deployed\n"
        assert runner.calls == [[str(hook.resolve())]]
        assert runner.cwds == [repo]

    def test_failing_hook(self, repo, checker, logger, runner):
        hook = add_hook(repo)
        runner.script([str(hook.resolve())], returncode=3, stderr="migration failed")

        with pytest.raises(DeployHookError) as exc_info:
            make_deployer(FakeVCS(), checker, logger, runner).deploy(repo)

        assert exc_info.value.exit_code == 6
        assert "migration failed" in exc_info.value.message

    def test_failing_hook_reports_its_output(self, repo, checker, logger, runner):
        hook = add_hook(repo)
        runner.script([str(hook.resolve())], returncode=1, stdout="step 1 ok\nstep 2 broke\n", stderr="exit")

        with pytest.raises(DeployHookError) as exc_info:
            make_deployer(FakeVCS(), checker, logger, runner).deploy(repo)

        assert exc_info.value.output == "step 1 ok\nstep 2 broke"
        assert exc_info.value.message.endswith("Hook output:\nstep 1 ok\nstep 2 broke")

    def test_non_executable_hook_is_skipped_with_warning(self, repo, checker, logger, runner):
        add_hook(repo, executable=False)

        report = make_deployer(FakeVCS(), checker, logger, runner).deploy(repo)

        assert report.hook_ran is False
        assert runner.calls == []
        assert report.warnings == ["deploy.sh is not executable, skipped"]


class TestDeployRestart:
    def test_restart_and_verify(self, repo, checker, logger):
        manager = FakeServiceManager(states={"app": ServiceState.ACTIVE})
        report = make_deployer(FakeVCS(), checker, logger, managers=[manager]).deploy(repo, restart="app")

        assert manager.restarted == ["app"]
        assert report.restarted == "app"
        assert report.restart_verified is True
        assert report.warnings == []

    def test_inactive_after_restart_is_warning(self, repo, checker, logger):
        manager = FakeServiceManager(after_restart=ServiceState.INACTIVE)
        report = make_deployer(FakeVCS(), checker, logger, managers=[manager]).deploy(repo, restart="app")

        assert report.restart_verified is False
        assert report.warnings == ["app is inactive after restart"]

    def test_restart_failure_is_warning(self, repo, checker, logger):
        manager = FakeServiceManager(restart_error="Unit app.service not found.")
        report = make_deployer(FakeVCS(), checker, logger, managers=[manager]).deploy(repo, restart="app")

        assert report.restarted is None
        assert "restart of app failed" in report.warnings[0]
        assert any("restart of app failed" in m for m in logger.messages("warning"))

    def test_no_manager_is_warning(self, repo, checker, logger):
        manager = FakeServiceManager(available=False)
        report = make_deployer(FakeVCS(), checker, logger, managers=[manager]).deploy(repo, restart="app")

        assert report.warnings == ["no service manager available, app not restarted"]
