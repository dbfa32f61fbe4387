"""FastAPI adapter for :class:`~a2a_bridge.server.transport.RouteRegistrar`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from a2a_bridge import __version__
from a2a_bridge.server.transport import JSON_CONTENT_TYPE, HttpRequest

if TYPE_CHECKING:
    from a2a_bridge.bridge import A2ABridge
    from a2a_bridge.server.transport import RouteHandler

# Handlers answer every verb themselves (the JSON-RPC route rejects non-POST
# with a JSON-RPC error rather than a framework 405).
_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class FastAPIRouteRegistrar:
    """Mounts bridge route handlers on a FastAPI application."""

    def __init__(self, app: FastAPI) -> None:
        self.app = app
        self.paths: list[str] = []

    def register_route(self, path: str, handler: RouteHandler) -> None:
        async def endpoint(request: Request) -> JSONResponse:
            inbound = HttpRequest.build(
                request.method,
                request.url.path,
                headers=dict(request.headers),
                body=await request.body(),
            )
            response = await handler(inbound)
            extra = {k: v for k, v in response.headers.items() if k.lower() != "content-type"}
            return JSONResponse(
                content=response.body,
                status_code=response.status,
                headers=extra,
                media_type=response.headers.get("Content-Type", JSON_CONTENT_TYPE),
            )

        self.app.add_api_route(
            path,
            endpoint,
            methods=_ALL_METHODS,
            include_in_schema=False,
        )
        self.paths.append(path)


def create_app(bridge: A2ABridge) -> FastAPI:
    """Build a FastAPI app serving the bridge's inbound routes."""
    app = FastAPI(title=f"{bridge.card.name} A2A bridge", version=__version__)
    bridge.register_routes(FastAPIRouteRegistrar(app))
    return app
