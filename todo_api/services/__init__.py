from .todo_service import TodoService

__all__ = ["TodoService"]
