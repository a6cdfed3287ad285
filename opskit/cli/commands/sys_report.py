"""
Native Click implementation of the sys-report command.

Usage: opskit sys-report [--output PATH]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.interfaces.host import IHostInfo
from ...core.interfaces.processes import IProcessLister
from ...services.system_report import SystemReportService
from ..context import OpsContext
from ..decorators import pass_ops_context


@click.command("sys-report")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the report to a file instead of stdout.",
)
@pass_ops_context
def sys_report(ctx: OpsContext, output: Path | None) -> None:
    """Print a snapshot of hostname, uptime, memory, disk and top processes."""
    service = SystemReportService(
        ctx.resolve(IHostInfo),  # type: ignore[type-abstract]
        ctx.resolve(IProcessLister),  # type: ignore[type-abstract]
        ctx.logger,
        process_count=ctx.settings.defaults.report_processes,
    )
    report = service.write(output)
    if output is not None:
        click.echo(f"System report written to {output}")
    else:
        click.echo(report, nl=False)
