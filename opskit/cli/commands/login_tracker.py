"""
Native Click implementation of the login-tracker command.

Usage: opskit login-tracker [COUNT] [--output PATH]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.interfaces.logins import ILoginHistory
from ...services.logins import LoginReportService
from ..context import OpsContext
from ..decorators import pass_ops_context, require_tools


@click.command("login-tracker")
@click.argument("count", type=click.IntRange(min=1), required=False)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the report to a file instead of stdout.",
)
@pass_ops_context
@require_tools(ILoginHistory.tool)
def login_tracker(ctx: OpsContext, count: int | None, output: Path | None) -> None:
    """Show the COUNT most recent logins (default 50)."""
    if count is None:
        count = ctx.settings.defaults.login_count

    service = LoginReportService(
        ctx.resolve(ILoginHistory),  # type: ignore[type-abstract]
        ctx.checker,
        ctx.logger,
    )
    report = service.run(count, output)
    if output is not None:
        click.echo(f"Login report written to {output}")
    else:
        click.echo(report.rstrip("\n"))
