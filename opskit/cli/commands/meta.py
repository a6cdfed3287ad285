"""
Native Click implementations of the help and version commands.

Usage: opskit help [COMMAND] | opskit version
"""

from __future__ import annotations

import click

from ... import __version__
from ...core.exceptions import UnknownCommandError


@click.command("help")
@click.argument("command", required=False)
@click.pass_context
def help_command(ctx: click.Context, command: str | None) -> None:
    """Show help for opskit or for one COMMAND."""
    root = ctx.find_root()
    if command is None:
        click.echo(root.get_help())
        return

    group: click.Group = root.command  # type: ignore[assignment]
    cmd = group.get_command(root, command)
    if cmd is None:
        click.echo(root.get_help(), err=True)
        raise UnknownCommandError(command)

    with click.Context(cmd, info_name=command, parent=root) as cmd_ctx:
        click.echo(cmd.get_help(cmd_ctx))


@click.command("version")
def version() -> None:
    """Print the opskit version."""
    click.echo(f"opskit {__version__}")
