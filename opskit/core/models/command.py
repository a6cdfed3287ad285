"""
Command table models.

The set of commands is closed: every top-level command is a member of
CommandName and every todo operation a member of TodoAction. The CLI
builds its lookup table from these enums at startup.
"""

from __future__ import annotations

from enum import Enum


class CommandName(str, Enum):
    """Top-level commands understood by the dispatcher."""

    CALC = "calc"
    BACKUP = "backup"
    LOGIN_TRACKER = "login-tracker"
    DU_REPORT = "du-report"
    TODO = "todo"
    SVC_CHECK = "svc-check"
    SYS_REPORT = "sys-report"
    LOG_ROTATE = "log-rotate"
    GIT_DEPLOY = "git-deploy"
    CPU_HOG = "cpu-hog"
    HELP = "help"
    VERSION = "version"


class TodoAction(str, Enum):
    """Sub-commands of `todo`."""

    ADD = "add"
    LIST = "list"
    DONE = "done"
    CLEAR = "clear"
