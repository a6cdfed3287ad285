"""
Native Click implementation of the du-report command.

Usage: opskit du-report [DIRECTORY] [--top N]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.interfaces.disk import IDiskUsage
from ...presenters.formatting import format_disk_report
from ...services.disk_report import DiskReportService
from ..context import OpsContext
from ..decorators import pass_ops_context


@click.command("du-report")
@click.argument("directory", type=click.Path(path_type=Path), default=Path("."))
@click.option("--top", "-n", type=click.IntRange(min=1), help="Number of entries to show (default 10).")
@pass_ops_context
def du_report(ctx: OpsContext, directory: Path, top: int | None) -> None:
    """List the largest entries directly under DIRECTORY."""
    if top is None:
        top = ctx.settings.defaults.du_top

    service = DiskReportService(
        ctx.resolve(IDiskUsage),  # type: ignore[type-abstract]
        ctx.checker,
        ctx.logger,
    )
    entries = service.run(directory, top)
    click.echo(format_disk_report(entries, directory))
