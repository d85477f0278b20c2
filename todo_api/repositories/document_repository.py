"""Todo repository over the in-process document container."""

from __future__ import annotations

import uuid
from typing import List, Optional

from ..database import DocumentContainer
from ..models.todo import Todo, TodoId, TodoInput
from .base import TodoRepository


class DocumentTodoRepository(TodoRepository):
    """Stores one camelCase JSON document per todo, keyed by a UUID string."""

    def __init__(self, container: DocumentContainer) -> None:
        self._container = container

    def parse_id(self, raw_id: str) -> Optional[TodoId]:
        try:
            return str(uuid.UUID(raw_id))
        except (TypeError, ValueError):
            return None

    async def list_all(self) -> List[Todo]:
        return [Todo.model_validate(doc) for doc in self._container.documents.values()]

    async def list_by_completion(self, is_complete: bool) -> List[Todo]:
        return [todo for todo in await self.list_all() if todo.is_complete is is_complete]

    async def get(self, todo_id: TodoId) -> Optional[Todo]:
        doc = self._container.documents.get(str(todo_id))
        if doc is None:
            return None
        return Todo.model_validate(doc)

    async def create(self, todo_input: TodoInput) -> Todo:
        todo = Todo(id=str(uuid.uuid4()), title=todo_input.title, is_complete=todo_input.is_complete)
        self._container.documents[todo.id] = todo.model_dump(by_alias=True, mode="json")
        return todo

    async def update(self, todo: Todo) -> Optional[Todo]:
        key = str(todo.id)
        if key not in self._container.documents:
            return None
        self._container.documents[key] = todo.model_dump(by_alias=True, mode="json")
        return todo

    async def delete(self, todo_id: TodoId) -> bool:
        return self._container.documents.pop(str(todo_id), None) is not None

    async def delete_all(self) -> int:
        removed = len(self._container.documents)
        self._container.reset()
        return removed
