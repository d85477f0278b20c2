"""Todo models."""

from .todo import Todo, TodoId, TodoInput

__all__ = ["Todo", "TodoId", "TodoInput"]
