"""
Native Click implementation of the log-rotate command.

Usage: opskit log-rotate [DIRECTORY] [--days N]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.interfaces.compression import ICompressor
from ...services.log_rotate import LogRotateService
from ..context import OpsContext
from ..decorators import pass_ops_context


@click.command("log-rotate")
@click.argument("directory", type=click.Path(path_type=Path), required=False)
@click.option("--days", "-d", type=click.IntRange(min=0), help="Minimum age in days (default 7).")
@pass_ops_context
def log_rotate(ctx: OpsContext, directory: Path | None, days: int | None) -> None:
    """Gzip every *.log file under DIRECTORY older than --days.

    DIRECTORY defaults to /var/log. Files that fail to compress are
    reported and skipped; the rest of the batch still runs.
    """
    defaults = ctx.settings.defaults
    if directory is None:
        directory = defaults.log_dir
    if days is None:
        days = defaults.log_age_days

    service = LogRotateService(
        ctx.resolve(ICompressor),  # type: ignore[type-abstract]
        ctx.checker,
        ctx.logger,
    )
    report = service.run(directory, days)

    for path in report.compressed:
        click.echo(f"Compressed {path}")
    for path in report.skipped:
        click.echo(f"Skipped {path}: compressed copy already exists", err=True)
    for failure in report.failed:
        click.echo(f"Failed {failure.path}: {failure.error}", err=True)
    click.echo(report.summary())
