"""Route handlers for the agent card and the JSON-RPC endpoint."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from a2a_bridge.a2a.models import AGENT_CARD_PATH
from a2a_bridge.server.auth import Credentials
from a2a_bridge.server.dispatcher import InboundRequest
from a2a_bridge.server.transport import HttpRequest, HttpResponse, RouteHandler

if TYPE_CHECKING:
    from a2a_bridge.a2a.models import AgentCard
    from a2a_bridge.server.dispatcher import InboundDispatcher
    from a2a_bridge.server.transport import RouteRegistrar


def agent_card_handler(card: AgentCard) -> RouteHandler:
    """Serve *card* as JSON.  Public: no credentials are checked."""
    payload = MappingProxyType(card.to_wire())

    async def handle(_request: HttpRequest) -> HttpResponse:
        return HttpResponse(200, dict(payload))

    return handle


def jsonrpc_handler(dispatcher: InboundDispatcher) -> RouteHandler:
    async def handle(request: HttpRequest) -> HttpResponse:
        reply = await dispatcher.dispatch(
            InboundRequest(
                http_method=request.method,
                body=request.body,
                credentials=Credentials.from_headers(request.headers),
            )
        )
        return HttpResponse(reply.status_code, reply.payload.to_wire())

    return handle


def register_routes(
    registrar: RouteRegistrar,
    *,
    card: AgentCard,
    dispatcher: InboundDispatcher,
    rpc_path: str = "/a2a",
) -> list[str]:
    """Register both routes on *registrar* and return their paths."""
    registrar.register_route(AGENT_CARD_PATH, agent_card_handler(card))
    registrar.register_route(rpc_path, jsonrpc_handler(dispatcher))
    return [AGENT_CARD_PATH, rpc_path]
