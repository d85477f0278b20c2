"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models.todo import Todo, TodoInput
from ..repositories.base import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic."""

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    async def list_todos(self) -> List[Todo]:
        """Get all todo items."""
        return await self.repository.list_all()

    async def list_by_completion(self, is_complete: bool) -> List[Todo]:
        """Get todo items in the given completion state."""
        return await self.repository.list_by_completion(is_complete)

    async def get_todo(self, raw_id: str) -> Optional[Todo]:
        """Get a todo by its path id; unparsable ids find nothing."""
        todo_id = self.repository.parse_id(raw_id)
        if todo_id is None:
            return None
        return await self.repository.get(todo_id)

    async def create_todo(self, todo_input: TodoInput) -> Todo:
        """Create a new todo item."""
        if not todo_input.title.strip():
            raise ValueError("Todo title cannot be empty")
        todo = await self.repository.create(todo_input)
        logger.info("Created todo id=%s", todo.id)
        return todo

    async def replace_todo(self, raw_id: str, todo_input: TodoInput) -> Optional[Todo]:
        """Replace title and completion state of an existing todo."""
        todo = await self.get_todo(raw_id)
        if todo is None:
            return None
        todo.title = todo_input.title
        todo.is_complete = todo_input.is_complete
        updated = await self.repository.update(todo)
        if updated is not None:
            logger.info("Replaced todo id=%s", updated.id)
        return updated

    async def set_completion(self, raw_id: str, is_complete: bool) -> Optional[Todo]:
        """Mark a todo complete or incomplete."""
        todo = await self.get_todo(raw_id)
        if todo is None:
            return None
        todo.is_complete = is_complete
        return await self.repository.update(todo)

    async def delete_todo(self, raw_id: str) -> bool:
        """Delete a todo item."""
        todo_id = self.repository.parse_id(raw_id)
        if todo_id is None:
            return False
        deleted = await self.repository.delete(todo_id)
        if deleted:
            logger.info("Deleted todo id=%s", todo_id)
        return deleted

    async def delete_all(self) -> int:
        """Delete every todo item."""
        removed = await self.repository.delete_all()
        logger.info("Deleted all todos count=%s", removed)
        return removed
