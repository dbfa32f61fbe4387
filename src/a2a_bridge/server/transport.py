"""Transport seam: framework-free request/response types and the route registrar.

The bridge never imports a web framework outside :mod:`a2a_bridge.server.asgi`;
it only needs something that satisfies :class:`RouteRegistrar`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True)
class HttpRequest:
    """An inbound request.  Header names are lower-cased."""

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        headers: Mapping[str, str] | None = None,
        body: bytes = b"",
    ) -> HttpRequest:
        normalized = {k.lower(): v for k, v in (headers or {}).items()}
        return cls(method=method.upper(), path=path, headers=normalized, body=body)


@dataclass(frozen=True)
class HttpResponse:
    """A JSON response."""

    status: int
    body: Any
    headers: Mapping[str, str] = field(
        default_factory=lambda: {"Content-Type": JSON_CONTENT_TYPE}
    )


RouteHandler = Callable[[HttpRequest], Awaitable[HttpResponse]]


@runtime_checkable
class RouteRegistrar(Protocol):
    """Accepts ``(path, async handler)`` pairs from the bridge."""

    def register_route(self, path: str, handler: RouteHandler) -> None: ...
