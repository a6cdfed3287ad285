"""
Click decorators for opskit CLI commands.

- require_tools: Ensures host executables are on PATH before the body runs
- pass_ops_context: Typed @click.pass_obj
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

if TYPE_CHECKING:
    from .context import OpsContext

F = TypeVar("F", bound=Callable[..., Any])


def require_tools(*names: str) -> Callable[[F], F]:
    """Decorator to require host tools.

    Raises MissingDependencyError (exit 3) naming the first tool that is
    not on PATH, before the command does anything.

    Usage:
        @click.command()
        @pass_ops_context
        @require_tools("ps")
        def cpu_hog(ctx: OpsContext, threshold: float):
            ...

    Note:
        This decorator should be applied AFTER @click.pass_obj so that
        the OpsContext is available.
    """

    def decorator(f: F) -> F:
        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ctx_maybe: Any = args[0] if args else kwargs.get("ctx")

            if ctx_maybe is None:
                raise click.ClickException(
                    "Internal error: OpsContext not available. "
                    "Ensure @click.pass_obj is applied before @require_tools."
                )
            ctx: OpsContext = ctx_maybe

            ctx.checker.require(*names)
            return f(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def pass_ops_context(f: F) -> F:
    """Thin wrapper around @click.pass_obj typed for OpsContext."""
    return click.pass_obj(f)  # type: ignore[return-value]
