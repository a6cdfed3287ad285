"""
Process listing via `ps aux`.
"""

from ..core.interfaces.process import IProcessRunner
from ..core.interfaces.processes import IProcessLister
from ..core.models.process import ProcessInfo, ProcessTable

# USER PID %CPU %MEM VSZ RSS TTY STAT START TIME COMMAND
_PS_AUX_FIELDS = 11


class PsProcessLister(IProcessLister):
    """
    Lists processes with `ps aux` and sorts them by CPU here.

    Sorting locally keeps the adapter working with ps builds that lack
    --sort.
    """

    def __init__(self, runner: IProcessRunner) -> None:
        self._runner = runner

    def by_cpu(self) -> ProcessTable:
        result = self._runner.run_checked(["ps", "aux"], description="ps failed")
        return parse_ps_aux(result.stdout)


def parse_ps_aux(output: str) -> ProcessTable:
    """Parse `ps aux` output into a table sorted by CPU, highest first."""
    lines = output.splitlines()
    if not lines:
        return ProcessTable(header="")

    processes = []
    for line in lines[1:]:
        parts = line.split(None, _PS_AUX_FIELDS - 1)
        if len(parts) < _PS_AUX_FIELDS:
            continue
        try:
            processes.append(
                ProcessInfo(
                    pid=int(parts[1]),
                    user=parts[0],
                    cpu=float(parts[2]),
                    mem=float(parts[3]),
                    command=parts[10],
                    line=line,
                )
            )
        except ValueError:
            continue

    processes.sort(key=lambda p: p.cpu, reverse=True)
    return ProcessTable(header=lines[0], processes=processes)
