"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

TodoId = Union[int, str]

REQUIRED_MESSAGE = "The {field} field is required."


class TodoInput(BaseModel):
    """Payload for creating or replacing todos.

    Any ``id`` sent by the client is ignored; the store assigns ids.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    is_complete: bool = Field(False, alias="isComplete")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", REQUIRED_MESSAGE.format(field="title"))
        return value


class Todo(BaseModel):
    """Stored todo item."""

    model_config = ConfigDict(populate_by_name=True)

    id: TodoId
    title: str
    is_complete: bool = Field(False, alias="isComplete")
