"""
Git deploy: fast-forward a working tree, run its hook, restart a service.

Order of operations:
1. git on PATH, REPO is a work tree, tree is clean
2. fetch, checkout, pull --ff-only
3. <repo>/<hook> if present and executable
4. optional service restart and verification (warnings only)
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from ..core.exceptions import (
    DeployHookError,
    DirtyWorkTreeError,
    InvalidArgumentError,
    NotARepositoryError,
    OpsException,
)
from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IProcessRunner
from ..core.interfaces.service_manager import IServiceManager
from ..core.interfaces.vcs import IVCSClient
from ..core.models.process import ServiceState
from ..core.models.reports import DeployReport
from .preconditions import PreconditionChecker
from .service_check import select_manager


class DeployService:
    """Deploys a branch into an existing git working tree."""

    def __init__(
        self,
        vcs: IVCSClient,
        managers: Sequence[IServiceManager],
        runner: IProcessRunner,
        checker: PreconditionChecker,
        logger: ILogger,
        hook_name: str = "deploy.sh",
        remote: str = "origin",
    ) -> None:
        self._vcs = vcs
        self._managers = list(managers)
        self._runner = runner
        self._checker = checker
        self._logger = logger
        self._hook_name = hook_name
        self._remote = remote

    def deploy(self, repo: Path, branch: str = "main", restart: str | None = None) -> DeployReport:
        """
        Run a deploy.

        Raises:
            MissingDependencyError: If git is not installed
            NotARepositoryError: If repo is not a git working tree
            DirtyWorkTreeError: If repo has uncommitted changes
            ExternalToolError: If fetch, checkout or pull fails
            DeployHookError: If the hook exits non-zero
        """
        if not branch or branch.startswith("-"):
            raise InvalidArgumentError(f"Invalid branch name: {branch!r}", argument="--branch")

        self._checker.require(self._vcs.tool)

        repo = repo.expanduser()
        if not repo.is_dir() or not self._vcs.is_repository(repo):
            self._logger.error("git-deploy: not a repository: %s", repo)
            raise NotARepositoryError(str(repo))

        clean, changes = self._vcs.get_status(repo)
        if not clean:
            self._logger.error("git-deploy: %s has %d uncommitted change(s)", repo, len(changes))
            raise DirtyWorkTreeError(str(repo), changes)

        self._logger.info("git-deploy: deploying %s in %s", branch, repo)
        report = DeployReport(branch=branch)

        self._update(repo, branch)
        report.commit = self._vcs.head_commit(repo)
        self._run_hook(repo, report)

        if restart:
            self._restart(restart, report)

        self._logger.info("git-deploy: deployed %s at %s", branch, report.short_commit)
        return report

    def _update(self, repo: Path, branch: str) -> None:
        try:
            self._vcs.fetch(repo, self._remote)
            self._vcs.checkout(repo, branch)
            self._vcs.pull(repo, branch, self._remote)
        except OpsException as e:
            self._logger.error("git-deploy: %s", e)
            raise

    def _run_hook(self, repo: Path, report: DeployReport) -> None:
        hook = repo / self._hook_name
        if not hook.is_file():
            self._logger.debug("git-deploy: no %s hook", self._hook_name)
            return
        if not os.access(hook, os.X_OK):
            message = f"{self._hook_name} is not executable, skipped"
            self._logger.warning("git-deploy: %s", message)
            report.warnings.append(message)
            return

        self._logger.info("git-deploy: running %s", hook)
        result = self._runner.run([str(hook.resolve())], cwd=repo)
        report.hook_output = result.stdout
        if not result.ok:
            self._logger.error("git-deploy: %s exited %d", self._hook_name, result.returncode)
            raise DeployHookError(
                f"{self._hook_name} exited with status {result.returncode}",
                argv=result.argv,
                returncode=result.returncode,
                stderr=result.stderr,
                output=result.stdout,
            )
        report.hook_ran = True

    def _restart(self, service: str, report: DeployReport) -> None:
        manager = select_manager(self._managers)
        if manager is None:
            self._warn(report, f"no service manager available, {service} not restarted")
            return

        try:
            manager.restart(service)
            report.restarted = service
            state = manager.state(service)
        except OpsException as e:
            self._warn(report, f"restart of {service} failed: {e.message}")
            return

        if state is ServiceState.ACTIVE:
            report.restart_verified = True
            self._logger.info("git-deploy: %s restarted and active", service)
        else:
            self._warn(report, f"{service} is {state.value} after restart")

    def _warn(self, report: DeployReport, message: str) -> None:
        self._logger.warning("git-deploy: %s", message)
        report.warnings.append(message)
