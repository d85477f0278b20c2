"""Todo persistence collaborators."""

from .base import TodoRepository
from .document_repository import DocumentTodoRepository
from .postgres_repository import PostgresTodoRepository

__all__ = ["DocumentTodoRepository", "PostgresTodoRepository", "TodoRepository"]
