"""
Todo list handler.
"""

from __future__ import annotations

from ...core.exceptions import InvalidArgumentError, TodoIndexError
from ...core.interfaces.confirmer import IConfirmer
from ...core.interfaces.logger import ILogger
from .store import TodoStore


class TodoService:
    """
    add / list / done / clear over a TodoStore.

    `clear` always goes through the confirmation gate.
    """

    def __init__(self, store: TodoStore, confirmer: IConfirmer, logger: ILogger) -> None:
        self._store = store
        self._confirmer = confirmer
        self._logger = logger

    def add(self, text: str) -> tuple[int, str]:
        """
        Append a task.

        Returns:
            (index, stored text)

        Raises:
            InvalidArgumentError: If the text is empty after trimming
        """
        entry = " ".join(text.splitlines()).strip()
        if not entry:
            raise InvalidArgumentError("Todo text must not be empty", argument="TEXT")
        index = self._store.append(entry)
        self._logger.info("todo: added #%d: %s", index, entry)
        return index, entry

    def list(self) -> list[str]:
        """All tasks, first is #1."""
        return self._store.read()

    def done(self, index: int | str) -> str:
        """
        Remove the task at a 1-based index.

        Returns:
            The removed text

        Raises:
            InvalidArgumentError: If index is not an integer
            TodoIndexError: If no task has that index (store unchanged)
        """
        try:
            number = int(str(index).strip())
        except ValueError as e:
            raise InvalidArgumentError(
                f"INDEX must be a number, got {index!r}", argument="INDEX", value=str(index)
            ) from e

        try:
            removed = self._store.remove(number)
        except IndexError as e:
            count = len(self._store.read())
            self._logger.warning("todo: done #%d rejected, %d entries", number, count)
            raise TodoIndexError(number, count) from e

        self._logger.info("todo: done #%d: %s", number, removed)
        return removed

    def clear(self) -> bool:
        """
        Empty the store after confirmation.

        Returns:
            True if cleared, False if the user declined
        """
        count = len(self._store.read())
        if not self._confirmer.confirm(f"Clear all {count} todos?"):
            self._logger.info("todo: clear cancelled")
            return False

        self._store.clear()
        self._logger.info("todo: cleared %d entries", count)
        return True
