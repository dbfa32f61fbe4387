"""A2ABridge — assembles the bridge from one :class:`BridgeConfig`.

Typical usage inside a host runtime::

    bridge = A2ABridge(load_config(path))
    bridge.register(route_registrar, tool_registrar)

Everything is built once in the constructor; the card, the registry and the
dispatcher are read-only afterwards, so a config change needs a restart.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from a2a_bridge.a2a.card import build_agent_card
from a2a_bridge.registry import RemoteAgentRegistry
from a2a_bridge.server.auth import SecretAuthenticator
from a2a_bridge.server.completions import ChatCompleter, ChatCompletionsClient
from a2a_bridge.server.dispatcher import InboundDispatcher
from a2a_bridge.server.routes import register_routes
from a2a_bridge.server.translator import InboundTranslator
from a2a_bridge.tools.provider import register_provider
from a2a_bridge.tools.remote_agents import RemoteAgentTools

if TYPE_CHECKING:
    from a2a_bridge.config import BridgeConfig
    from a2a_bridge.server.transport import RouteRegistrar
    from a2a_bridge.tools.provider import ToolRegistrar

logger = logging.getLogger(__name__)


class A2ABridge:
    """The inbound endpoint and the outbound tools, wired together."""

    def __init__(self, config: BridgeConfig, *, completer: ChatCompleter | None = None) -> None:
        self.config = config
        self.card = build_agent_card(config)
        self.registry = RemoteAgentRegistry(config.remote_agents)
        self.completer: ChatCompleter = completer or ChatCompletionsClient(
            config.gateway.base_url,
            token=config.gateway.token,
            model=config.gateway.model,
            timeout=config.gateway.timeout,
        )
        self.dispatcher = InboundDispatcher(
            SecretAuthenticator(config.secret),
            InboundTranslator(self.completer),
        )
        self.tools = RemoteAgentTools(self.registry)

    def register_routes(self, registrar: RouteRegistrar) -> list[str]:
        return register_routes(
            registrar,
            card=self.card,
            dispatcher=self.dispatcher,
            rpc_path=self.config.server.rpc_path,
        )

    def register_tools(self, registrar: ToolRegistrar) -> list[str]:
        return register_provider(registrar, self.tools)

    def register(self, routes: RouteRegistrar, tools: ToolRegistrar) -> None:
        """Register the card route, the JSON-RPC route and the remote-agent tools."""
        paths = self.register_routes(routes)
        self.register_tools(tools)
        logger.info(
            "A2A bridge: registered (agent card + %s endpoint + %d remote agent(s): %s)",
            paths[-1],
            len(self.registry),
            self.registry.describe_ids(),
        )
