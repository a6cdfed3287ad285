"""
Version control client interface (git-deploy).
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IVCSClient(ABC):
    """
    Interface for the version control operations a deploy needs.

    Every mutating method raises ExternalToolError on failure.
    """

    tool: str = "git"

    @abstractmethod
    def is_repository(self, path: Path) -> bool:
        """Check whether path is inside a working tree."""
        pass

    @abstractmethod
    def get_status(self, repo: Path) -> tuple[bool, list[str]]:
        """
        Get working tree status.

        Returns:
            (is_clean, list_of_changes)
        """
        pass

    @abstractmethod
    def fetch(self, repo: Path, remote: str = "origin") -> None:
        """Fetch from a remote."""
        pass

    @abstractmethod
    def checkout(self, repo: Path, branch: str) -> None:
        """Check out a branch."""
        pass

    @abstractmethod
    def pull(self, repo: Path, branch: str, remote: str = "origin") -> None:
        """Fast-forward the branch from its remote."""
        pass

    @abstractmethod
    def head_commit(self, repo: Path) -> str | None:
        """Get the current commit hash, or None if there is none."""
        pass
