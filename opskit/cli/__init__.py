"""
Click-based CLI for opskit.

This module provides the main Click command group and serves as the
entry point for the opskit CLI.

Usage:
    from opskit.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .. import __version__
from ..core.models.command import CommandName
from .context import OpsContext
from .group import OpsClickException, OpsGroup


@click.group(cls=OpsGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="opskit", message="%(prog)s %(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """opskit - host operations toolkit

    Thin wrappers around host utilities with shared argument checking,
    precondition checks and an operational log.

    \b
    Files:
        calc                 Integer and floating-point arithmetic
        backup               Archive a path to a .tar.gz
        todo                 Personal todo list

    \b
    Host reports:
        login-tracker        Recent logins
        du-report            Largest entries in a directory
        sys-report           System snapshot
        cpu-hog              Processes above a CPU threshold
        svc-check            Is a service running?

    \b
    Maintenance:
        log-rotate           Compress stale *.log files
        git-deploy           Fast-forward a repo, run its hook, restart a service
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        ctx.obj = OpsContext.create()


def register_commands() -> None:
    """Register all CLI commands with the main group.

    Raises:
        RuntimeError: If the command table and CommandName disagree
    """
    from .commands import COMMANDS

    missing = [name.value for name in CommandName if name not in COMMANDS]
    if missing:
        raise RuntimeError(f"No command registered for: {', '.join(missing)}")

    for name, cmd in COMMANDS.items():
        if cmd.name != name.value:
            raise RuntimeError(f"Command {cmd.name!r} registered as {name.value!r}")
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


# Export public API
__all__ = [
    "OpsClickException",
    "OpsContext",
    "OpsGroup",
    "__version__",
    "cli",
    "register_commands",
]
