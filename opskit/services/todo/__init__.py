"""Todo list store and handler."""

from .service import TodoService
from .store import TodoStore

__all__ = ["TodoService", "TodoStore"]
