"""
Text formatting for opskit command output.
"""

from .formatting import format_disk_report, format_process_table, format_size, format_todo_list

__all__ = ["format_disk_report", "format_process_table", "format_size", "format_todo_list"]
