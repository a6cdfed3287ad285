"""
Host tool adapters.

Production implementations of the capability interfaces in
opskit.core.interfaces. Each one shells out through IProcessRunner.
"""

from .bc import BcEvaluator
from .du import DuDiskUsage
from .git import GitClient
from .gzip import GzipCompressor
from .host import ShellHostInfo
from .last import LastLoginHistory
from .pgrep import ProcessServiceManager
from .ps import PsProcessLister
from .systemd import SystemdServiceManager
from .tar import TarArchiveWriter

__all__ = [
    "BcEvaluator",
    "DuDiskUsage",
    "GitClient",
    "GzipCompressor",
    "LastLoginHistory",
    "ProcessServiceManager",
    "PsProcessLister",
    "ShellHostInfo",
    "SystemdServiceManager",
    "TarArchiveWriter",
]
