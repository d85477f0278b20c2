"""API routes for todo management."""

import logging
from typing import Callable, Dict

from fastapi import APIRouter, Depends, Response

from .. import responses
from ..models.todo import TodoInput
from ..routing import ROUTES
from ..services.todo_service import TodoService
from ..settings import Settings
from .dependencies import get_app_settings, get_todo_service

logger = logging.getLogger(__name__)


async def hello_text() -> Response:
    return responses.ok("Hello World!")


async def hello_json() -> Response:
    return responses.ok_object({"hello": "World"})


async def list_todos(service: TodoService = Depends(get_todo_service)) -> Response:
    """Get all todo items."""
    return responses.ok_object(await service.list_todos())


async def list_complete_todos(service: TodoService = Depends(get_todo_service)) -> Response:
    return responses.ok_object(await service.list_by_completion(True))


async def list_incomplete_todos(service: TodoService = Depends(get_todo_service)) -> Response:
    return responses.ok_object(await service.list_by_completion(False))


async def find_todo(id: str, service: TodoService = Depends(get_todo_service)) -> Response:
    """Get a specific todo item by ID."""
    todo = await service.get_todo(id)
    if todo is None:
        return responses.not_found()
    return responses.ok_object(todo)


async def create_todo(
    todo_input: TodoInput,
    service: TodoService = Depends(get_todo_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Create a new todo item and point ``Location`` at it."""
    todo = await service.create_todo(todo_input)
    return responses.created("todo-find", {"id": todo.id}, todo, prefix=settings.api_prefix)


async def replace_todo(
    id: str,
    todo_input: TodoInput,
    service: TodoService = Depends(get_todo_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Replace title and completion state of a todo item."""
    todo = await service.replace_todo(id, todo_input)
    if todo is None and not settings.put_missing_no_content:
        return responses.not_found()
    return responses.no_content()


async def mark_complete(id: str, service: TodoService = Depends(get_todo_service)) -> Response:
    if await service.set_completion(id, True) is None:
        return responses.not_found()
    return responses.no_content()


async def mark_incomplete(id: str, service: TodoService = Depends(get_todo_service)) -> Response:
    if await service.set_completion(id, False) is None:
        return responses.not_found()
    return responses.no_content()


async def delete_todo(id: str, service: TodoService = Depends(get_todo_service)) -> Response:
    """Delete a todo item."""
    if not await service.delete_todo(id):
        return responses.not_found()
    return responses.no_content()


async def delete_all_todos(
    service: TodoService = Depends(get_todo_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Delete every todo item, unless this deployment has it switched off."""
    if not settings.delete_all_enabled:
        logger.warning("Delete-all requested but disabled for this deployment")
        raise NotImplementedError("not implemented yet")
    await service.delete_all()
    return responses.no_content()


HANDLERS: Dict[str, Callable[..., object]] = {
    "hello-text": hello_text,
    "hello-json": hello_json,
    "todo-list": list_todos,
    "todo-list-complete": list_complete_todos,
    "todo-list-incomplete": list_incomplete_todos,
    "todo-find": find_todo,
    "todo-post": create_todo,
    "todo-put": replace_todo,
    "todo-mark-complete": mark_complete,
    "todo-mark-incomplete": mark_incomplete,
    "todo-delete": delete_todo,
    "todo-delete-all": delete_all_todos,
}


def build_router() -> APIRouter:
    """Register every handler in registry order."""
    router = APIRouter()
    for name, route in ROUTES.items():
        router.add_api_route(route.path, HANDLERS[name], methods=[route.method], name=name)
    return router


router = build_router()
