"""
tar archive writer.
"""

from pathlib import Path

from ..core.interfaces.archive import IArchiveWriter
from ..core.interfaces.process import IProcessRunner


class TarArchiveWriter(IArchiveWriter):
    """Writes gzip-compressed tarballs with `tar -czf`."""

    def __init__(self, runner: IProcessRunner) -> None:
        self._runner = runner

    def create(self, source: Path, destination: Path) -> None:
        # -C keeps member names relative to the source's parent
        self._runner.run_checked(
            ["tar", "-czf", str(destination), "-C", str(source.parent), source.name],
            description=f"tar failed to archive {source}",
        )
