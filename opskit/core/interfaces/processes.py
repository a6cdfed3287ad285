"""Process listing interface (cpu-hog, sys-report)."""

from abc import ABC, abstractmethod

from opskit.core.models.process import ProcessTable


class IProcessLister(ABC):
    """Lists running processes."""

    tool: str = "ps"

    @abstractmethod
    def by_cpu(self) -> ProcessTable:
        """
        List every process, highest CPU usage first.

        Raises:
            ExternalToolError: If the listing fails
        """
        pass
