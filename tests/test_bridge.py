"""Tests for A2ABridge assembly and registration."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest

from a2a_bridge.bridge import A2ABridge
from a2a_bridge.config import BridgeConfig, GatewaySettings, ServerSettings
from a2a_bridge.server.completions import ChatCompletionsClient
from a2a_bridge.tools.dispatcher import ToolDispatcher


class RecordingRegistrar:
    def __init__(self) -> None:
        self.routes: dict = {}

    def register_route(self, path, handler) -> None:
        self.routes[path] = handler


class TestA2ABridge:
    def test_default_completer_from_gateway(self) -> None:
        config = BridgeConfig(
            gateway=GatewaySettings(base_url="http://gw:1234", token="t", model="m", timeout=5.0)
        )
        bridge = A2ABridge(config)
        assert isinstance(bridge.completer, ChatCompletionsClient)
        assert bridge.completer.url == "http://gw:1234/v1/chat/completions"
        assert bridge.completer.model == "m"
        assert bridge.completer.timeout == 5.0

    def test_injected_completer(self) -> None:
        completer = AsyncMock()
        assert A2ABridge(BridgeConfig(), completer=completer).completer is completer

    def test_register_routes_uses_rpc_path(self) -> None:
        registrar = RecordingRegistrar()
        bridge = A2ABridge(BridgeConfig(server=ServerSettings(rpc_path="/rpc")))
        paths = bridge.register_routes(registrar)
        assert paths == ["/.well-known/agent-card.json", "/rpc"]
        assert bridge.card.url == "http://127.0.0.1:18790/rpc"

    def test_register_logs_summary(self, config_with_agents, caplog: pytest.LogCaptureFixture) -> None:
        registrar = RecordingRegistrar()
        tools = ToolDispatcher()
        bridge = A2ABridge(config_with_agents)

        with caplog.at_level(logging.INFO, logger="a2a_bridge.bridge"):
            bridge.register(registrar, tools)

        assert set(registrar.routes) == {"/.well-known/agent-card.json", "/a2a"}
        assert [s["function"]["name"] for s in tools.all_tools()] == [
            "a2a_call_remote",
            "a2a_list_remote_agents",
            "a2a_discover_remote",
        ]
        assert (
            "A2A bridge: registered (agent card + /a2a endpoint + 2 remote agent(s): vaelor, nourl)"
            in caplog.text
        )
