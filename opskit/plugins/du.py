"""
du-backed disk usage.
"""

from collections.abc import Sequence
from pathlib import Path

from ..core.exceptions import ExternalToolError
from ..core.interfaces.disk import IDiskUsage
from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IProcessRunner
from ..core.models.process import DiskUsageEntry
from ..services.logging import NullLogger


class DuDiskUsage(IDiskUsage):
    """
    Measures paths with a single `du -sk` call.

    du reports 1024-byte blocks; sizes are converted to bytes. du exits 1
    when any entry is unreadable but still prints the sizes it could
    measure, so a non-zero exit only fails when nothing was measured.
    """

    def __init__(self, runner: IProcessRunner, logger: ILogger | None = None) -> None:
        self._runner = runner
        self._logger = logger or NullLogger()

    def measure(self, paths: Sequence[Path]) -> list[DiskUsageEntry]:
        if not paths:
            return []

        result = self._runner.run(["du", "-sk", "--", *(str(p) for p in paths)])
        entries = parse_du_output(result.stdout)

        if not result.ok and not entries:
            raise ExternalToolError(
                "du failed",
                argv=result.argv,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        if result.stderr.strip():
            for line in result.stderr.strip().splitlines():
                self._logger.warning("du-report: %s", line)
        return entries


def parse_du_output(output: str) -> list[DiskUsageEntry]:
    """Parse `du -sk` lines of the form '<kilobytes>\\t<path>'."""
    entries = []
    for line in output.splitlines():
        size, sep, path = line.partition("\t")
        if not sep or not size.strip().isdigit():
            continue
        entries.append(DiskUsageEntry(path=Path(path), size_bytes=int(size) * 1024))
    return entries
