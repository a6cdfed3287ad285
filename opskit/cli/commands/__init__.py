"""
Click command implementations for opskit CLI.

Each module corresponds to an opskit command (e.g., backup.py implements
'opskit backup'). COMMANDS maps every CommandName to its command and is
checked for completeness by register_commands() in opskit.cli.
"""

from __future__ import annotations

import click

from ...core.models.command import CommandName
from .backup import backup
from .calc import calc
from .cpu_hog import cpu_hog
from .du_report import du_report
from .git_deploy import git_deploy
from .log_rotate import log_rotate
from .login_tracker import login_tracker
from .meta import help_command, version
from .svc_check import svc_check
from .sys_report import sys_report
from .todo import todo

COMMANDS: dict[CommandName, click.Command] = {
    CommandName.CALC: calc,
    CommandName.BACKUP: backup,
    CommandName.LOGIN_TRACKER: login_tracker,
    CommandName.DU_REPORT: du_report,
    CommandName.TODO: todo,
    CommandName.SVC_CHECK: svc_check,
    CommandName.SYS_REPORT: sys_report,
    CommandName.LOG_ROTATE: log_rotate,
    CommandName.GIT_DEPLOY: git_deploy,
    CommandName.CPU_HOG: cpu_hog,
    CommandName.HELP: help_command,
    CommandName.VERSION: version,
}

__all__ = [
    "COMMANDS",
    "backup",
    "calc",
    "cpu_hog",
    "du_report",
    "git_deploy",
    "help_command",
    "log_rotate",
    "login_tracker",
    "svc_check",
    "sys_report",
    "todo",
    "version",
]
