"""
External process interfaces.

IProcessRunner is the one place opskit starts other programs.
IToolLocator answers whether a program is on PATH at all.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from opskit.core.models.process import ProcessResult


class IProcessRunner(ABC):
    """Runs an external program to completion and captures its output."""

    @abstractmethod
    def run(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        input: str | None = None,
    ) -> ProcessResult:
        """
        Run a program and wait for it.

        Args:
            argv: Program and arguments
            cwd: Working directory (default: inherit)
            input: Text fed to the program's stdin

        Returns:
            ProcessResult with exit code and captured output

        Raises:
            MissingDependencyError: If the program cannot be executed
        """
        pass

    @abstractmethod
    def run_checked(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        input: str | None = None,
        description: str | None = None,
    ) -> ProcessResult:
        """
        Run a program and fail on non-zero exit.

        Raises:
            ExternalToolError: If the program exits non-zero
        """
        pass


class IToolLocator(ABC):
    """Resolves program names on the execution path."""

    @abstractmethod
    def which(self, name: str) -> str | None:
        """
        Find a program.

        Returns:
            Absolute path to the program, or None if not found
        """
        pass
