"""Response builders shared by the route handlers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from .routing import url_for
from .settings import DEFAULT_API_PREFIX

VALIDATION_TITLE = "One or more validation errors occurred."
PROBLEM_JSON = "application/problem+json"


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def ok(content: str) -> PlainTextResponse:
    """200 with a ``text/plain; charset=utf-8`` body."""
    return PlainTextResponse(content, status_code=status.HTTP_200_OK)


def ok_object(data: Any) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(data))


def not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def created(
    route_name: str,
    route_values: Optional[Mapping[str, Any]] = None,
    data: Any = None,
    *,
    prefix: str = DEFAULT_API_PREFIX,
) -> Response:
    """201 whose ``Location`` points at the named route.

    The body is only written when ``data`` is given.
    """
    headers = {"Location": url_for(route_name, route_values, prefix=prefix)}
    if data is None:
        return Response(status_code=status.HTTP_201_CREATED, headers=headers)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=jsonable_encoder(data), headers=headers)


def validation_failure(
    errors: Mapping[str, List[str]],
    detail: Optional[str] = None,
    instance: Optional[str] = None,
    status_code: Optional[int] = None,
    title: Optional[str] = None,
    type: Optional[str] = None,
) -> JSONResponse:
    """400 carrying a validation problem-details document."""
    problem: Dict[str, Any] = {
        "type": type,
        "title": title if title and title.strip() else VALIDATION_TITLE,
        "status": status_code if status_code is not None else status.HTTP_400_BAD_REQUEST,
        "detail": detail,
        "instance": instance,
        "errors": {field: list(messages) for field, messages in errors.items()},
    }
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem,
        media_type=PROBLEM_JSON,
    )
