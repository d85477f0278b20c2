"""Todo repository over a Postgres connection."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import asyncpg

from ..models.todo import Todo, TodoId, TodoInput
from .base import TodoRepository

_BIGINT_MAX = 2**63 - 1
_COLUMNS = "id, title, is_complete"


def _row_to_todo(row: Optional[Mapping[str, Any]]) -> Optional[Todo]:
    if row is None:
        return None
    return Todo(id=row["id"], title=row["title"], is_complete=row["is_complete"])


def _affected_rows(status: str) -> int:
    # asyncpg returns the command tag, e.g. "DELETE 3".
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0


class PostgresTodoRepository(TodoRepository):
    """Relational store; ids are database-generated sequential integers."""

    def __init__(self, conn: asyncpg.Connection) -> None:
        self._conn = conn

    def parse_id(self, raw_id: str) -> Optional[TodoId]:
        if not (raw_id.isascii() and raw_id.isdigit()):
            return None
        value = int(raw_id)
        if value < 1 or value > _BIGINT_MAX:
            return None
        return value

    async def list_all(self) -> List[Todo]:
        rows = await self._conn.fetch(f"SELECT {_COLUMNS} FROM todos ORDER BY id")
        return [_row_to_todo(row) for row in rows]

    async def list_by_completion(self, is_complete: bool) -> List[Todo]:
        rows = await self._conn.fetch(
            f"SELECT {_COLUMNS} FROM todos WHERE is_complete = $1 ORDER BY id",
            is_complete,
        )
        return [_row_to_todo(row) for row in rows]

    async def get(self, todo_id: TodoId) -> Optional[Todo]:
        row = await self._conn.fetchrow(f"SELECT {_COLUMNS} FROM todos WHERE id = $1", todo_id)
        return _row_to_todo(row)

    async def create(self, todo_input: TodoInput) -> Todo:
        row = await self._conn.fetchrow(
            f"INSERT INTO todos (title, is_complete) VALUES ($1, $2) RETURNING {_COLUMNS}",
            todo_input.title,
            todo_input.is_complete,
        )
        return _row_to_todo(row)

    async def update(self, todo: Todo) -> Optional[Todo]:
        row = await self._conn.fetchrow(
            f"UPDATE todos SET title = $2, is_complete = $3 WHERE id = $1 RETURNING {_COLUMNS}",
            todo.id,
            todo.title,
            todo.is_complete,
        )
        return _row_to_todo(row)

    async def delete(self, todo_id: TodoId) -> bool:
        status = await self._conn.execute("DELETE FROM todos WHERE id = $1", todo_id)
        return _affected_rows(status) > 0

    async def delete_all(self) -> int:
        status = await self._conn.execute("DELETE FROM todos")
        return _affected_rows(status)
