"""Tests for route handlers and registration."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

from a2a_bridge.a2a.card import build_agent_card
from a2a_bridge.a2a.models import AGENT_CARD_PATH, A2ATask
from a2a_bridge.config import BridgeConfig
from a2a_bridge.server.auth import SecretAuthenticator
from a2a_bridge.server.dispatcher import InboundDispatcher
from a2a_bridge.server.routes import agent_card_handler, jsonrpc_handler, register_routes
from a2a_bridge.server.transport import JSON_CONTENT_TYPE, HttpRequest, RouteRegistrar


class RecordingRegistrar:
    def __init__(self) -> None:
        self.routes: dict = {}

    def register_route(self, path, handler) -> None:
        self.routes[path] = handler


def _dispatcher(secret: str = "") -> InboundDispatcher:
    translator = AsyncMock()
    translator.translate.return_value = A2ATask.completed_with_text("Hi")
    return InboundDispatcher(SecretAuthenticator(secret), translator)


def _rpc_body() -> bytes:
    return json.dumps(
        {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "message/send",
            "params": {"message": {"parts": [{"kind": "text", "text": "Hello"}]}},
        }
    ).encode()


class TestAgentCardHandler:
    async def test_serves_card(self) -> None:
        card = build_agent_card(BridgeConfig(secret="s3cret"))
        response = await agent_card_handler(card)(HttpRequest.build("GET", AGENT_CARD_PATH))

        assert response.status == 200
        assert response.headers["Content-Type"] == JSON_CONTENT_TYPE
        assert response.body["name"] == "Assistant"
        assert response.body["protocolVersion"] == "0.3.0"
        assert "s3cret" not in json.dumps(response.body)

    async def test_no_credentials_needed(self) -> None:
        card = build_agent_card(BridgeConfig(secret="s3cret"))
        response = await agent_card_handler(card)(HttpRequest.build("POST", AGENT_CARD_PATH))
        assert response.status == 200

    async def test_body_is_a_copy(self) -> None:
        handler = agent_card_handler(build_agent_card(BridgeConfig()))
        first = await handler(HttpRequest.build("GET", AGENT_CARD_PATH))
        first.body["name"] = "tampered"
        second = await handler(HttpRequest.build("GET", AGENT_CARD_PATH))
        assert second.body["name"] == "Assistant"


class TestJsonRpcHandler:
    async def test_reads_bearer_header(self) -> None:
        handler = jsonrpc_handler(_dispatcher("s3cret"))
        request = HttpRequest.build(
            "post", "/a2a", headers={"Authorization": "Bearer s3cret"}, body=_rpc_body()
        )
        response = await handler(request)
        assert response.status == 200
        assert response.body["result"]["kind"] == "task"

    async def test_reads_fallback_header(self) -> None:
        handler = jsonrpc_handler(_dispatcher("s3cret"))
        request = HttpRequest.build(
            "POST", "/a2a", headers={"X-Webhook-Secret": "s3cret"}, body=_rpc_body()
        )
        response = await handler(request)
        assert response.status == 200

    async def test_rejects_missing_credentials(self) -> None:
        handler = jsonrpc_handler(_dispatcher("s3cret"))
        response = await handler(HttpRequest.build("POST", "/a2a", body=_rpc_body()))
        assert response.status == 401
        assert response.body["error"]["code"] == -32000
        assert response.body["id"] is None


class TestRegisterRoutes:
    def test_registers_both_paths(self) -> None:
        registrar = RecordingRegistrar()
        assert isinstance(registrar, RouteRegistrar)
        paths = register_routes(
            registrar,
            card=build_agent_card(BridgeConfig()),
            dispatcher=_dispatcher(),
            rpc_path="/rpc",
        )
        assert paths == [AGENT_CARD_PATH, "/rpc"]
        assert set(registrar.routes) == {AGENT_CARD_PATH, "/rpc"}


class TestHttpRequest:
    def test_build_normalizes(self) -> None:
        request = HttpRequest.build("post", "/a2a", headers={"X-Webhook-Secret": "v"})
        assert request.method == "POST"
        assert request.headers == {"x-webhook-secret": "v"}
        assert request.body == b""
