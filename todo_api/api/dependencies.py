"""API dependencies for todo management."""

from typing import AsyncIterator

from fastapi import Depends, Request

from .. import db
from ..repositories import DocumentTodoRepository, PostgresTodoRepository, TodoRepository
from ..services.todo_service import TodoService
from ..settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


async def get_todo_repository(request: Request) -> AsyncIterator[TodoRepository]:
    """Repository for the active store.

    With Postgres enabled a connection is acquired for this request and
    released once the response is done.
    """
    if db.is_enabled():
        async with db.acquire() as conn:
            yield PostgresTodoRepository(conn)
    else:
        yield DocumentTodoRepository(request.app.state.container)


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
