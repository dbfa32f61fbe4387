"""Tool layer: remote-agent tools and the in-process tool dispatcher."""

from a2a_bridge.tools.dispatcher import ToolDispatcher, ToolNotFoundError
from a2a_bridge.tools.models import TextContent, ToolResult, ToolSpec
from a2a_bridge.tools.provider import ToolProvider, ToolRegistrar, register_provider
from a2a_bridge.tools.remote_agents import RemoteAgentTools

__all__ = [
    "RemoteAgentTools",
    "TextContent",
    "ToolDispatcher",
    "ToolNotFoundError",
    "ToolProvider",
    "ToolRegistrar",
    "ToolResult",
    "ToolSpec",
    "register_provider",
]
