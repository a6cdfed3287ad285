"""
opskit - host operations toolkit.

One entry point for a set of thin wrappers around host utilities
(tar, last, du, ps, systemctl, git, gzip, bc) with shared argument
checking, precondition checks, confirmation gating and logging.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("opskit")
except PackageNotFoundError:
    __version__ = "0.1.0"
