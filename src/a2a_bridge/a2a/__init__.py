"""A2A protocol: agent cards, wire models and the outbound client."""

from a2a_bridge.a2a.card import build_agent_card
from a2a_bridge.a2a.client import A2AClient, extract_text
from a2a_bridge.a2a.models import (
    A2AArtifact,
    A2AMessage,
    A2APart,
    A2ATask,
    A2ATaskStatus,
    AgentCard,
    AgentSkill,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    RemoteResult,
)

__all__ = [
    "A2AArtifact",
    "A2AClient",
    "A2AMessage",
    "A2APart",
    "A2ATask",
    "A2ATaskStatus",
    "AgentCard",
    "AgentSkill",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "RemoteResult",
    "build_agent_card",
    "extract_text",
]
