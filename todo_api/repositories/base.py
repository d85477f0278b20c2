"""Base todo repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.todo import Todo, TodoId, TodoInput


class TodoRepository(ABC):
    """
    Persistence collaborator for todos.

    Queries are explicit methods rather than predicates so that any store,
    in-process or remote, can answer them.
    """

    @abstractmethod
    def parse_id(self, raw_id: str) -> Optional[TodoId]:
        """Convert a path value to a store id, or None if it cannot be one."""

    @abstractmethod
    async def list_all(self) -> List[Todo]:
        """List all todos."""

    @abstractmethod
    async def list_by_completion(self, is_complete: bool) -> List[Todo]:
        """List todos whose completion state matches."""

    @abstractmethod
    async def get(self, todo_id: TodoId) -> Optional[Todo]:
        """Get a todo by id."""

    @abstractmethod
    async def create(self, todo_input: TodoInput) -> Todo:
        """Persist a new todo and return it with its assigned id."""

    @abstractmethod
    async def update(self, todo: Todo) -> Optional[Todo]:
        """Overwrite an existing todo. Returns None if it no longer exists."""

    @abstractmethod
    async def delete(self, todo_id: TodoId) -> bool:
        """Delete a todo. Returns True if deleted, False if not found."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every todo and return how many were removed."""
