"""
Native Click implementation of the cpu-hog command.

Usage: opskit cpu-hog [THRESHOLD]
"""

from __future__ import annotations

import click

from ...core.interfaces.processes import IProcessLister
from ...presenters.formatting import format_process_table
from ...services.cpu_hog import CpuHogService
from ..context import OpsContext
from ..decorators import pass_ops_context, require_tools


@click.command("cpu-hog")
@click.argument("threshold", type=click.FloatRange(min=0), required=False)
@pass_ops_context
@require_tools(IProcessLister.tool)
def cpu_hog(ctx: OpsContext, threshold: float | None) -> None:
    """List processes using more than THRESHOLD percent CPU (default 30)."""
    defaults = ctx.settings.defaults
    if threshold is None:
        threshold = defaults.cpu_threshold

    service = CpuHogService(
        ctx.resolve(IProcessLister),  # type: ignore[type-abstract]
        ctx.checker,
        ctx.logger,
        limit=defaults.cpu_limit,
    )
    table = service.run(threshold)
    click.echo(format_process_table(table, threshold=threshold))
