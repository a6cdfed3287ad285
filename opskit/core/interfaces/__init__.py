"""
Capability interfaces for opskit.

Each host tool opskit drives sits behind one of these ABCs. Production
adapters live in opskit.plugins; tests substitute fakes.
"""

from .archive import IArchiveWriter
from .compression import ICompressor
from .confirmer import IConfirmer
from .disk import IDiskUsage
from .evaluator import IExpressionEvaluator
from .host import IHostInfo
from .logger import ILogger
from .logins import ILoginHistory
from .process import IProcessRunner, IToolLocator
from .processes import IProcessLister
from .service_manager import IServiceManager
from .vcs import IVCSClient

__all__ = [
    "IArchiveWriter",
    "ICompressor",
    "IConfirmer",
    "IDiskUsage",
    "IExpressionEvaluator",
    "IHostInfo",
    "ILogger",
    "ILoginHistory",
    "IProcessLister",
    "IProcessRunner",
    "IServiceManager",
    "IToolLocator",
    "IVCSClient",
]
