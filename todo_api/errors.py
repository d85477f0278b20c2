"""Exception handlers mapping request errors to problem-details responses.

Persistence and runtime errors have no handler here; they reach
Starlette's server-error middleware and surface as a plain 500.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from .models.todo import REQUIRED_MESSAGE
from .responses import validation_failure

logger = logging.getLogger(__name__)


def _field_name(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] in {"body", "path", "query"}:
        parts = parts[1:]
    names = [str(part) for part in parts if isinstance(part, str)]
    return ".".join(names) or "body"


def _is_required_error(error: Dict[str, Any]) -> bool:
    if error.get("type") == "missing":
        return True
    # An explicit null reads as an absent value.
    return error.get("type") == "string_type" and error.get("input", "") is None


def collect_errors(raw_errors: Sequence[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Group pydantic errors by field name, one message list per field."""
    errors: Dict[str, List[str]] = {}
    for error in raw_errors:
        field = _field_name(error.get("loc", ()))
        if _is_required_error(error):
            message = REQUIRED_MESSAGE.format(field=field)
        else:
            message = error.get("msg", "Invalid value.")
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors


def register_error_handlers(app: FastAPI) -> None:
    """Register request error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = collect_errors(exc.errors())
        logger.warning("Validation failed on %s %s: fields=%s", request.method, request.url.path, sorted(errors))
        return validation_failure(errors)
