"""
Confirmation gate interface.

Every irreversible bulk delete asks an IConfirmer first.
"""

from abc import ABC, abstractmethod


class IConfirmer(ABC):
    """Synchronous yes/no question whose default answer is no."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """
        Ask the question and block until it is answered.

        Args:
            message: Question to show, without the [y/N] suffix

        Returns:
            True only for an explicit affirmative answer
        """
        pass
