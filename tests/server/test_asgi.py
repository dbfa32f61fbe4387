"""End-to-end tests of the FastAPI app with a stubbed completer."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from a2a_bridge.bridge import A2ABridge
from a2a_bridge.config import BridgeConfig
from a2a_bridge.errors import UpstreamError
from a2a_bridge.server.asgi import create_app

_RPC = {
    "jsonrpc": "2.0",
    "id": "req-1",
    "method": "message/send",
    "params": {"message": {"role": "user", "messageId": "m1", "parts": [{"kind": "text", "text": "Hello"}]}},
}


@pytest.fixture
def completer() -> AsyncMock:
    mock = AsyncMock()
    mock.complete.return_value = "Hi from the assistant"
    return mock


def _client(completer: AsyncMock, secret: str = "") -> TestClient:
    bridge = A2ABridge(BridgeConfig(secret=secret), completer=completer)
    return TestClient(create_app(bridge))


class TestAgentCardRoute:
    def test_get_card(self, completer) -> None:
        response = _client(completer, "s3cret").get("/.well-known/agent-card.json")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        card = response.json()
        assert card["url"] == "http://127.0.0.1:18790/a2a"
        assert card["preferredTransport"] == "JSONRPC"
        assert card["securitySchemes"] == {"bearer": {"type": "http", "scheme": "bearer"}}


class TestJsonRpcRoute:
    def test_message_send(self, completer) -> None:
        response = _client(completer).post("/a2a", json=_RPC)

        assert response.status_code == 200
        body = response.json()
        assert body["jsonrpc"] == "2.0"
        assert body["id"] == "req-1"
        task = body["result"]
        assert task["kind"] == "task"
        assert task["status"]["state"] == "completed"
        assert task["artifacts"][0]["parts"] == [{"kind": "text", "text": "Hi from the assistant"}]
        completer.complete.assert_awaited_once_with("Hello")

    def test_bearer_auth(self, completer) -> None:
        client = _client(completer, "s3cret")
        assert client.post("/a2a", json=_RPC).status_code == 401
        ok = client.post("/a2a", json=_RPC, headers={"Authorization": "Bearer s3cret"})
        assert ok.status_code == 200

    def test_fallback_header_auth(self, completer) -> None:
        response = _client(completer, "s3cret").post(
            "/a2a", json=_RPC, headers={"X-Webhook-Secret": "s3cret"}
        )
        assert response.status_code == 200

    def test_get_is_405_with_jsonrpc_body(self, completer) -> None:
        response = _client(completer).get("/a2a")
        assert response.status_code == 405
        assert response.json()["error"]["message"] == "Method not allowed, use POST"

    def test_parse_error(self, completer) -> None:
        response = _client(completer).post(
            "/a2a", content=b"{oops", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {
            "jsonrpc": "2.0",
            "error": {"code": -32700, "message": "Parse error"},
            "id": None,
        }

    def test_upstream_failure(self, completer) -> None:
        completer.complete.side_effect = UpstreamError(502, "gateway body")
        response = _client(completer).post("/a2a", json=_RPC)
        assert response.status_code == 200
        error = response.json()["error"]
        assert error["code"] == -32603
        assert "gateway body" not in error["message"]
