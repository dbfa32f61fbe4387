"""RemoteAgentTools — lets the local assistant call external A2A agents.

Three tools are exposed:

``a2a_call_remote``
    Send a message to a configured agent and return its normalized reply.
``a2a_list_remote_agents``
    List the configured agents.
``a2a_discover_remote``
    Fetch a configured agent's card as received.

Every outcome, success or failure, is returned as a JSON tool result; no
exception escapes :meth:`RemoteAgentTools.execute_tool` for a known tool.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from a2a_bridge.a2a.client import A2AClient
from a2a_bridge.errors import ConfigError, RemoteAgentError
from a2a_bridge.tools.dispatcher import ToolNotFoundError
from a2a_bridge.tools.models import ToolResult, ToolSpec
from a2a_bridge.utils.telemetry import ATTR_REMOTE_AGENT, get_tracer

if TYPE_CHECKING:
    from a2a_bridge.config import RemoteAgentEntry
    from a2a_bridge.registry import RemoteAgentRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

CALL_REMOTE = "a2a_call_remote"
LIST_REMOTE = "a2a_list_remote_agents"
DISCOVER_REMOTE = "a2a_discover_remote"


class RemoteAgentTools:
    """Tool provider backed by a :class:`RemoteAgentRegistry`.

    Satisfies the :class:`~a2a_bridge.tools.provider.ToolProvider` protocol.
    """

    def __init__(
        self,
        registry: RemoteAgentRegistry,
        *,
        client_factory: type[A2AClient] = A2AClient,
    ) -> None:
        self._registry = registry
        self._client_factory = client_factory

    def tool_specs(self) -> list[ToolSpec]:
        agent_param = {
            "type": "string",
            "description": f"Remote agent ID. Available: {self._registry.describe_ids()}",
        }
        return [
            ToolSpec(
                name=CALL_REMOTE,
                description=(
                    "Send a message to a remote A2A agent and get a response. "
                    f"Use {LIST_REMOTE} to see available agents."
                ),
                parameters={
                    "type": "object",
                    "properties": {
                        "agent": agent_param,
                        "message": {
                            "type": "string",
                            "description": "Message to send to the remote agent",
                        },
                    },
                    "required": ["agent", "message"],
                },
            ),
            ToolSpec(
                name=LIST_REMOTE,
                description="List all configured remote A2A agents available for calling",
                parameters={"type": "object", "properties": {}},
            ),
            ToolSpec(
                name=DISCOVER_REMOTE,
                description="Fetch the agent card (capabilities, skills) of a remote A2A agent",
                parameters={
                    "type": "object",
                    "properties": {"agent": agent_param},
                    "required": ["agent"],
                },
            ),
        ]

    async def execute_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        if name == CALL_REMOTE:
            return await self.call_remote(arguments.get("agent"), arguments.get("message"))
        if name == LIST_REMOTE:
            return self.list_remote_agents()
        if name == DISCOVER_REMOTE:
            return await self.discover_remote(arguments.get("agent"))
        raise ToolNotFoundError(name)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    async def call_remote(self, agent_id: Any, message: Any) -> ToolResult:
        if not agent_id or not message:
            return _error("Both 'agent' and 'message' are required")
        agent_id = str(agent_id)

        try:
            entry, url = self._resolve(agent_id)
        except ConfigError as exc:
            return self._config_error(agent_id, exc)

        with _tracer.start_as_current_span("a2a.tool.call_remote") as span:
            span.set_attribute(ATTR_REMOTE_AGENT, agent_id)
            try:
                async with self._client_factory(url, token=entry.token) as client:
                    card = await client.fetch_agent_card()
                    endpoint = client.endpoint_for(card)
                    logger.info('A2A calling remote agent "%s" at %s', agent_id, endpoint)
                    response = await client.send_message(endpoint, str(message))
            except RemoteAgentError as exc:
                logger.error("A2A call to %s failed: %s", agent_id, exc)
                return _error(f"A2A call to {agent_id} failed: {exc}")

        return ToolResult.from_json(
            {
                "agent": agent_id,
                "agentName": card.name or entry.alias or agent_id,
                "response": response,
            }
        )

    def list_remote_agents(self) -> ToolResult:
        agents: list[dict[str, Any]] = []
        for agent_id, entry in self._registry.entries():
            item: dict[str, Any] = {"id": agent_id, "url": entry.url}
            if entry.alias is not None:
                item["alias"] = entry.alias
            agents.append(item)
        return ToolResult.from_json({"agents": agents, "count": len(agents)})

    async def discover_remote(self, agent_id: Any) -> ToolResult:
        if not agent_id:
            return _error("'agent' is required")
        agent_id = str(agent_id)

        try:
            entry, url = self._resolve(agent_id)
        except ConfigError as exc:
            return self._config_error(agent_id, exc)

        with _tracer.start_as_current_span("a2a.tool.discover_remote") as span:
            span.set_attribute(ATTR_REMOTE_AGENT, agent_id)
            try:
                async with self._client_factory(url, token=entry.token) as client:
                    card = await client.fetch_agent_card_raw()
            except RemoteAgentError as exc:
                logger.error("A2A discovery of %s failed: %s", agent_id, exc)
                return _error(f"Discovery failed for {agent_id}: {exc}")

        return ToolResult.from_json({"agent": agent_id, "card": card})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve(self, agent_id: str) -> tuple[RemoteAgentEntry, str]:
        """Look up *agent_id* and its URL; raise ConfigError before any network access."""
        entry = self._registry.get(agent_id)
        if entry is None:
            msg = f"Unknown agent: {agent_id}. Available: {self._registry.describe_ids()}"
            raise ConfigError(msg)
        if not entry.url:
            msg = f"Agent {agent_id} has no URL configured"
            raise ConfigError(msg)
        return entry, entry.url

    def _config_error(self, agent_id: Any, exc: ConfigError) -> ToolResult:
        payload: dict[str, Any] = {"error": str(exc)}
        if agent_id not in self._registry:
            payload["known_agents"] = self._registry.ids()
        return ToolResult.from_json(payload)


def _error(message: str) -> ToolResult:
    return ToolResult.from_json({"error": message})
