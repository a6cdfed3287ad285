"""Host snapshot interface (sys-report)."""

from abc import ABC, abstractmethod


class IHostInfo(ABC):
    """
    Reads host facts for the system snapshot.

    Each method returns text ready to print. Methods that shell out raise
    MissingDependencyError or ExternalToolError; the report turns those into
    an 'unavailable' line instead of failing.
    """

    @abstractmethod
    def hostname(self) -> str:
        pass

    @abstractmethod
    def uptime(self) -> str:
        pass

    @abstractmethod
    def memory(self) -> str:
        pass

    @abstractmethod
    def disk(self) -> str:
        pass
