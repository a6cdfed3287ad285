"""
Subprocess-backed process runner and PATH lookup.

Every host adapter starts programs through SubprocessRunner so that the
exit-code and stderr contract is applied in one place.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..core.exceptions import ExternalToolError, MissingDependencyError
from ..core.interfaces.process import IProcessRunner, IToolLocator
from ..core.models.process import ProcessResult


class SubprocessRunner(IProcessRunner):
    """
    Runs programs with subprocess.run, capturing text output.

    Usage:
        runner = SubprocessRunner()
        result = runner.run_checked(["git", "fetch", "origin"], cwd=repo)
    """

    def run(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        input: str | None = None,
    ) -> ProcessResult:
        """Run a program and capture its output."""
        args = [str(a) for a in argv]
        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                input=input,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise MissingDependencyError(args[0]) from e
        except PermissionError as e:
            raise ExternalToolError(
                f"Cannot execute {args[0]}", argv=args, stderr=str(e), cause=e
            ) from e

        return ProcessResult(
            argv=args,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def run_checked(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        input: str | None = None,
        description: str | None = None,
    ) -> ProcessResult:
        """Run a program and raise ExternalToolError on non-zero exit."""
        result = self.run(argv, cwd=cwd, input=input)
        if not result.ok:
            raise ExternalToolError(
                description or f"{shlex.join(result.argv)} exited with {result.returncode}",
                argv=result.argv,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result


class PathToolLocator(IToolLocator):
    """Looks programs up on $PATH."""

    def which(self, name: str) -> str | None:
        return shutil.which(name)
