"""
Click group with opskit's dispatch rules.
"""

from __future__ import annotations

from typing import Any

import click

from ..core.exceptions import OpsException, UnknownCommandError


class OpsClickException(click.ClickException):
    """ClickException carrying an OpsException's message and exit code."""

    def __init__(self, error: OpsException) -> None:
        super().__init__(error.message)
        self.exit_code = error.exit_code
        self.error = error


class OpsGroup(click.Group):
    """
    Command group with opskit's dispatch rules.

    Unknown command names print the group help to stderr and fail with
    UnknownCommandError before any command runs. Any OpsException from a
    command becomes a ClickException with the matching exit code.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        name = args[0]
        if self.get_command(ctx, name) is None and not ctx.resilient_parsing:
            self.reject_command(ctx, name)
        return super().resolve_command(ctx, args)

    def reject_command(self, ctx: click.Context, name: str) -> None:
        """Report an unknown command name and fail."""
        click.echo(ctx.get_help(), err=True)
        raise UnknownCommandError(name, group=self.name if ctx.parent else None)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except OpsException as e:
            raise OpsClickException(e) from e
