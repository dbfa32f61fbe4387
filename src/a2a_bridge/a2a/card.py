"""Build the bridge's own agent card from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from a2a_bridge.a2a.models import AgentCapabilities, AgentCard, AgentSkill

if TYPE_CHECKING:
    from a2a_bridge.config import BridgeConfig, ServerSettings

_WILDCARD_HOSTS = {"0.0.0.0", "::", ""}

BEARER_SCHEME = "bearer"


def callable_url(server: ServerSettings) -> str:
    """The address external agents should POST ``message/send`` to."""
    if server.public_url:
        return server.public_url
    host = "127.0.0.1" if server.host in _WILDCARD_HOSTS else server.host
    return f"http://{host}:{server.port}{server.rpc_path}"


def build_agent_card(config: BridgeConfig) -> AgentCard:
    """Construct the immutable agent card.

    The bearer security scheme is only advertised when a secret is
    configured; a card without one describes a public endpoint.
    """
    identity = config.agent
    security: dict[str, Any] = {}
    if config.auth_enabled:
        security = {
            "security_schemes": {BEARER_SCHEME: {"type": "http", "scheme": "bearer"}},
            "security": [{BEARER_SCHEME: []}],
        }
    return AgentCard(
        name=identity.name,
        description=identity.description,
        url=callable_url(config.server),
        version=identity.version,
        capabilities=AgentCapabilities(streaming=False),
        skills=[
            AgentSkill(
                id=skill.id,
                name=skill.name,
                description=skill.description,
                tags=list(skill.tags),
            )
            for skill in identity.skills
        ],
        **security,
    )
