"""Login history interface (login-tracker)."""

from abc import ABC, abstractmethod


class ILoginHistory(ABC):
    """Reads the host's login records."""

    tool: str = "last"

    @abstractmethod
    def recent(self, count: int) -> str:
        """
        Return the most recent login records as text, newest first.

        Raises:
            ExternalToolError: If the lookup fails
        """
        pass
