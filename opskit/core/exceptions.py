"""
Custom exception hierarchy for opskit.

Every failure a command can hit is one of these classes. Each carries the
process exit code the CLI should use, so handlers raise and the dispatcher
maps.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class OpsException(Exception):
    """
    Base exception for all opskit errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, tool names, etc.)
        exit_code: Exit code the CLI uses for this failure (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Usage Errors
# =============================================================================


class OpsUsageError(OpsException):
    """Wrong argument count or shape. Raised before any side effect."""

    exit_code: int = 2


class InvalidArgumentError(OpsUsageError, ValueError):
    """
    Invalid command-line argument.

    Inherits from ValueError so plain parsing helpers can be caught
    either way.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class UnknownCommandError(OpsUsageError):
    """A command or sub-command token matched nothing in the command table."""

    def __init__(self, name: str, *, group: str | None = None) -> None:
        self.name = name
        where = f"{group} " if group else ""
        super().__init__(f"Unknown {where}command: {name!r}")


class ConfigurationError(OpsUsageError):
    """Environment or explicit settings values failed validation."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid configuration: {detail}")


# =============================================================================
# Dependency Errors
# =============================================================================


class MissingDependencyError(OpsException):
    """A required host executable is not on PATH."""

    exit_code: int = 3

    def __init__(self, tool: str, *, context: dict | None = None) -> None:
        self.tool = tool
        super().__init__(f"Required tool not found on PATH: {tool}", context=context)


# =============================================================================
# Precondition Errors
# =============================================================================


class PreconditionError(OpsException):
    """The host is not in the state the command needs."""

    exit_code: int = 4


class PathNotFoundError(PreconditionError):
    """A path argument does not exist (or is the wrong kind of file)."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message, context={"path": path} if path else None)


class NotARepositoryError(PreconditionError):
    """The deploy target is not a git working tree."""

    def __init__(self, repo_path: str) -> None:
        super().__init__(f"Not a git repository: {repo_path}")


class ServiceNotFoundError(PreconditionError):
    """The service manager does not know the named service."""

    def __init__(self, service: str) -> None:
        self.service = service
        super().__init__(f"Service not found: {service}")


class DirtyWorkTreeError(PreconditionError):
    """
    The working tree has uncommitted changes.

    Deploys stop here, before any fetch, checkout or pull.
    """

    exit_code: int = 5

    def __init__(self, repo_path: str, changes: Sequence[str]) -> None:
        self.changes = list(changes)
        lines = [f"Repository has uncommitted changes: {repo_path}"]
        for change in self.changes[:5]:
            lines.append(f"  {change}")
        if len(self.changes) > 5:
            lines.append(f"  ... and {len(self.changes) - 5} more")
        lines.append("Commit or stash them before deploying.")
        super().__init__("\n".join(lines))


# =============================================================================
# Execution Errors
# =============================================================================


class ExternalToolError(OpsException):
    """
    An external program returned non-zero.

    The captured stderr is the error detail shown to the user.
    """

    def __init__(
        self,
        message: str,
        *,
        argv: Sequence[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.argv = list(argv or [])
        self.returncode = returncode
        self.stderr = (stderr or "").strip()
        detail = f"{message}: {self.stderr}" if self.stderr else message
        super().__init__(detail, cause=cause)


class DeployHookError(ExternalToolError):
    """
    The repository's deploy hook exited non-zero.

    Whatever the hook printed on stdout is appended to the message.
    """

    exit_code: int = 6

    def __init__(self, message: str, *, output: str | None = None, **kwargs: Any) -> None:
        self.output = (output or "").rstrip()
        super().__init__(message, **kwargs)
        if self.output:
            self.message = f"{self.message}\nHook output:\n{self.output}"
            self.args = (self.message,)


class ServiceInactiveError(OpsException):
    """A known service is not running."""

    def __init__(self, service: str, state: str) -> None:
        self.service = service
        self.state = state
        super().__init__(f"Service {service} is {state}")


class ArithmeticFailure(OpsException):
    """Arithmetic could not be carried out (division by zero, bad expression)."""

    pass


class TodoIndexError(OpsException):
    """A todo index does not name an existing entry."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        if count == 0:
            super().__init__(f"No todo #{index}: the list is empty")
        else:
            super().__init__(f"No todo #{index}: valid range is 1-{count}")
