"""
gzip single-file compressor.
"""

from pathlib import Path

from ..core.interfaces.compression import ICompressor
from ..core.interfaces.process import IProcessRunner


class GzipCompressor(ICompressor):
    """Compresses in place with `gzip`, replacing FILE with FILE.gz."""

    def __init__(self, runner: IProcessRunner) -> None:
        self._runner = runner

    def compress(self, path: Path) -> Path:
        self._runner.run_checked(
            ["gzip", "--", str(path)],
            description=f"gzip failed on {path}",
        )
        return path.with_name(path.name + self.suffix)
