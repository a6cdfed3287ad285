"""
Git client for deploys.
"""

from pathlib import Path

from ..core.interfaces.process import IProcessRunner
from ..core.interfaces.vcs import IVCSClient


class GitClient(IVCSClient):
    """
    Git operations needed by git-deploy.

    Read-only queries return None/False on failure; fetch, checkout and
    pull raise ExternalToolError with git's stderr.
    """

    def __init__(self, runner: IProcessRunner) -> None:
        self._runner = runner

    def is_repository(self, path: Path) -> bool:
        result = self._runner.run(["git", "rev-parse", "--is-inside-work-tree"], cwd=path)
        return result.ok and result.stdout.strip() == "true"

    def get_status(self, repo: Path) -> tuple[bool, list[str]]:
        result = self._runner.run_checked(
            ["git", "status", "--porcelain=v1"],
            cwd=repo,
            description="git status failed",
        )
        lines = [line for line in result.stdout.splitlines() if line.strip()]
        return len(lines) == 0, lines

    def fetch(self, repo: Path, remote: str = "origin") -> None:
        self._runner.run_checked(
            ["git", "fetch", remote],
            cwd=repo,
            description=f"git fetch {remote} failed",
        )

    def checkout(self, repo: Path, branch: str) -> None:
        self._runner.run_checked(
            ["git", "checkout", branch],
            cwd=repo,
            description=f"git checkout {branch} failed",
        )

    def pull(self, repo: Path, branch: str, remote: str = "origin") -> None:
        self._runner.run_checked(
            ["git", "pull", "--ff-only", remote, branch],
            cwd=repo,
            description=f"git pull {remote} {branch} failed",
        )

    def head_commit(self, repo: Path) -> str | None:
        result = self._runner.run(["git", "rev-parse", "HEAD"], cwd=repo)
        if not result.ok:
            return None
        return result.stdout.strip() or None
