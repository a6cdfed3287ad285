"""
Shared formatting utilities for opskit CLI output.

Handlers return data; commands render it with these helpers so the
output shape lives in one place.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.models.process import DiskUsageEntry, ProcessTable

_UNITS = ("K", "M", "G", "T", "P")


def format_size(size_bytes: int | None) -> str:
    """Format byte size the way `du -h` does.

    Args:
        size_bytes: Size in bytes, or None

    Returns:
        Human-readable size string

    Examples:
        >>> format_size(None)
        '?'
        >>> format_size(500)
        '500B'
        >>> format_size(4096)
        '4.0K'
        >>> format_size(1572864)
        '1.5M'
        >>> format_size(52428800)
        '50M'
    """
    if size_bytes is None:
        return "?"
    if size_bytes < 1024:
        return f"{size_bytes}B"

    value = float(size_bytes)
    unit = ""
    for unit in _UNITS:
        value /= 1024
        if value < 1024:
            break

    if value < 10:
        return f"{value:.1f}{unit}"
    return f"{value:.0f}{unit}"


def format_disk_report(entries: Sequence[DiskUsageEntry], directory: Path) -> str:
    """Render du-report rows as `<size>\\t<path>` lines."""
    if not entries:
        return f"No entries in {directory}"
    return "\n".join(f"{format_size(e.size_bytes)}\t{e.path}" for e in entries)


def format_process_table(table: ProcessTable, threshold: float | None = None) -> str:
    """Render a process listing with its header row.

    With a threshold and no rows, the header is followed by a
    "No processes above" line instead.
    """
    lines = [table.header]
    if table.processes:
        lines.extend(p.line for p in table.processes)
    elif threshold is not None:
        lines.append(f"No processes above {threshold:g}% CPU")
    return "\n".join(lines)


def format_todo_list(entries: Sequence[str]) -> str:
    """Number todo entries from 1, or say there are none."""
    if not entries:
        return "No todos"
    return "\n".join(f"{i}. {entry}" for i, entry in enumerate(entries, start=1))
