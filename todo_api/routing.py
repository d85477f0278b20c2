"""Static route registry.

Every API route is declared here by name with its path template. Handlers are
registered from these entries and ``Location`` headers are resolved against
them, so the two always agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from .settings import DEFAULT_API_PREFIX


@dataclass(frozen=True)
class RouteSegment:
    text: str
    is_parameter: bool = False


@dataclass(frozen=True)
class RouteTemplate:
    name: str
    method: str
    template: str
    segments: Tuple[RouteSegment, ...]

    @property
    def path(self) -> str:
        parts = [f"{{{seg.text}}}" if seg.is_parameter else seg.text for seg in self.segments]
        return "/" + "/".join(parts)

    def resolve(self, values: Optional[Mapping[str, Any]] = None) -> str:
        """Substitute parameter values; a missing value leaves an empty segment."""
        values = values or {}
        parts = []
        for seg in self.segments:
            if not seg.is_parameter:
                parts.append(seg.text)
                continue
            value = values.get(seg.text)
            parts.append("" if value is None else quote(str(value), safe=""))
        return "/" + "/".join(parts)


def parse_template(template: str) -> Tuple[RouteSegment, ...]:
    """Split ``todos/{id:guid}`` into literal and parameter segments."""
    stripped = template.strip("/")
    if not stripped:
        raise ValueError("Route template must not be empty")

    segments = []
    for part in stripped.split("/"):
        if part.startswith("{") and part.endswith("}"):
            name = part[1:-1].split(":", 1)[0].strip()
            if not name or "{" in name or "}" in name:
                raise ValueError(f"Invalid route parameter '{part}' in '{template}'")
            segments.append(RouteSegment(name, is_parameter=True))
        elif "{" in part or "}" in part:
            raise ValueError(f"Unbalanced braces in route segment '{part}' of '{template}'")
        else:
            segments.append(RouteSegment(part))
    return tuple(segments)


def _route(name: str, method: str, template: str) -> RouteTemplate:
    return RouteTemplate(name=name, method=method, template=template, segments=parse_template(template))


# Static routes come before the {id} routes they would otherwise collide with.
ROUTES: Dict[str, RouteTemplate] = {
    route.name: route
    for route in (
        _route("hello-text", "GET", "text"),
        _route("hello-json", "GET", "hello"),
        _route("todo-list", "GET", "todos"),
        _route("todo-list-complete", "GET", "todos/complete"),
        _route("todo-list-incomplete", "GET", "todos/incomplete"),
        _route("todo-find", "GET", "todos/{id}"),
        _route("todo-post", "POST", "todos"),
        _route("todo-mark-complete", "PUT", "todos/{id}/mark-complete"),
        _route("todo-mark-incomplete", "PUT", "todos/{id}/mark-incomplete"),
        _route("todo-put", "PUT", "todos/{id}"),
        _route("todo-delete-all", "DELETE", "todos/delete-all"),
        _route("todo-delete", "DELETE", "todos/{id}"),
    )
}


def get_route(name: str) -> RouteTemplate:
    try:
        return ROUTES[name]
    except KeyError:
        raise KeyError(f"Unknown route '{name}'") from None


def url_for(name: str, values: Optional[Mapping[str, Any]] = None, prefix: str = DEFAULT_API_PREFIX) -> str:
    """Build the URL of a named route, e.g. ``/api/todos/7``."""
    return prefix.rstrip("/") + get_route(name).resolve(values)
