"""Bridge configuration: one immutable settings object per process.

Typical usage::

    config = load_config(Path("bridge.yaml"))
    bridge = A2ABridge(config)

Example YAML::

    secret: ${A2A_SECRET}
    server:
      host: 127.0.0.1
      port: 18790
    gateway:
      base_url: http://127.0.0.1:18789
      token: ${GATEWAY_TOKEN}
    agent:
      name: Assistant
      skills:
        - id: general
          name: General Assistant
    remote_agents:
      vaelor:
        url: https://vaelor.example.com
        token: ${VAELOR_TOKEN}
        alias: Vaelor
"""

from __future__ import annotations

import os
from pathlib import Path  # noqa: TC003
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from a2a_bridge.errors import ConfigError

DEFAULT_GATEWAY_PORT = 18789
DEFAULT_DESCRIPTION = (
    "AI assistant with access to tools, memory, web search, code execution, "
    "and multi-agent coordination."
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SkillSettings(_Frozen):
    id: str
    name: str
    description: str = ""
    tags: tuple[str, ...] = ()


def _default_skills() -> tuple[SkillSettings, ...]:
    return (
        SkillSettings(
            id="general",
            name="General Assistant",
            description="Answer questions, execute tasks, search the web, manage memory",
        ),
    )


class AgentIdentity(_Frozen):
    """How this bridge describes itself in its agent card."""

    name: str = "Assistant"
    description: str = DEFAULT_DESCRIPTION
    version: str = "1.0.0"
    skills: tuple[SkillSettings, ...] = Field(default_factory=_default_skills)


class ServerSettings(_Frozen):
    """Where the inbound routes are served."""

    host: str = "127.0.0.1"
    port: int = 18790
    rpc_path: str = "/a2a"
    public_url: str | None = None

    @field_validator("rpc_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        return value if value.startswith("/") else "/" + value


class GatewaySettings(_Frozen):
    """The host chat-completions service."""

    base_url: str = f"http://127.0.0.1:{DEFAULT_GATEWAY_PORT}"
    token: str = ""
    model: str = "openclaw"
    timeout: float = 120.0


class RemoteAgentEntry(_Frozen):
    """A configured external A2A agent.  ``url`` is checked at call time."""

    url: str | None = None
    token: str | None = None
    alias: str | None = None


class TelemetrySettings(_Frozen):
    enabled: bool = False
    otlp_endpoint: str | None = None


class BridgeConfig(_Frozen):
    """Top-level bridge configuration.

    An empty ``secret`` disables inbound authentication entirely.
    """

    secret: str = ""
    server: ServerSettings = Field(default_factory=ServerSettings)
    gateway: GatewaySettings = Field(default_factory=GatewaySettings)
    agent: AgentIdentity = Field(default_factory=AgentIdentity)
    remote_agents: dict[str, RemoteAgentEntry] = Field(default_factory=dict)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
    log_level: str = "INFO"

    @field_validator("remote_agents", mode="before")
    @classmethod
    def _empty_agents(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def auth_enabled(self) -> bool:
        return bool(self.secret)


def parse_config(raw: str) -> BridgeConfig:
    """Parse YAML text into a :class:`BridgeConfig`.

    Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
    using :func:`os.path.expandvars` before YAML parsing.

    Raises:
        ConfigError: On YAML parse errors or schema validation failures.
    """
    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Bridge config must be a mapping")

    try:
        return BridgeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Path | None) -> BridgeConfig:
    """Load the config file at *path*, or defaults when *path* is ``None``."""
    if path is None:
        return BridgeConfig()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    return parse_config(raw)
