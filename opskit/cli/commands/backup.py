"""
Native Click implementation of the backup command.

Usage: opskit backup SOURCE DEST
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.interfaces.archive import IArchiveWriter
from ...services.backup import BackupService
from ..context import OpsContext
from ..decorators import pass_ops_context


@click.command("backup")
@click.argument("source", type=click.Path(path_type=Path))
@click.argument("dest", type=click.Path(path_type=Path))
@pass_ops_context
def backup(ctx: OpsContext, source: Path, dest: Path) -> None:
    """Archive SOURCE into the gzip-compressed tarball DEST.

    Missing parent directories of DEST are created. The archive stores
    SOURCE relative to its parent directory.

    \b
    Examples:

        opskit backup ~/projects /mnt/backup/projects.tar.gz
    """
    service = BackupService(
        ctx.resolve(IArchiveWriter),  # type: ignore[type-abstract]
        ctx.checker,
        ctx.logger,
    )
    archive = service.run(source, dest)
    click.echo(f"Backup created: {archive}")
