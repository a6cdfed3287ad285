"""
System snapshot report.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..core.exceptions import OpsException
from ..core.interfaces.host import IHostInfo
from ..core.interfaces.logger import ILogger
from ..core.interfaces.processes import IProcessLister


class SystemReportService:
    """
    Builds a text snapshot: hostname, uptime, memory, disk and the
    busiest processes.

    A section whose tool is missing or fails reads "(unavailable: ...)";
    the report itself never fails.
    """

    def __init__(
        self,
        host: IHostInfo,
        lister: IProcessLister,
        logger: ILogger,
        process_count: int = 20,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._host = host
        self._lister = lister
        self._logger = logger
        self._process_count = process_count
        self._clock = clock

    def build(self) -> str:
        """Render the snapshot as text."""
        taken = self._clock().strftime("%Y-%m-%d %H:%M:%S")
        lines = [
            f"=== System report ({taken}) ===",
            f"Hostname: {self._section('hostname', self._host.hostname)}",
            "",
            "--- Uptime ---",
            self._section("uptime", self._host.uptime),
            "",
            "--- Memory ---",
            self._section("memory", self._host.memory),
            "",
            "--- Disk ---",
            self._section("disk", self._host.disk),
            "",
            f"--- Top {self._process_count} processes by CPU ---",
            self._section("processes", self._top_processes),
        ]
        return "\n".join(lines) + "\n"

    def write(self, output: Path | None = None) -> str:
        """Build the report and save it to output if given."""
        report = self.build()
        if output is not None:
            output = output.expanduser()
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(report, encoding="utf-8")
            self._logger.info("sys-report: wrote %s", output)
        else:
            self._logger.info("sys-report: generated")
        return report

    def _top_processes(self) -> str:
        table = self._lister.by_cpu()
        rows = [p.line for p in table.processes[: self._process_count]]
        return "\n".join([table.header, *rows])

    def _section(self, name: str, read: Callable[[], str]) -> str:
        try:
            return read()
        except OpsException as e:
            self._logger.warning("sys-report: %s unavailable: %s", name, e)
            return f"(unavailable: {e.message})"
