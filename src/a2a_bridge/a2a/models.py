"""A2A models — Agent-to-Agent protocol data structures.

Agents advertise capabilities via an ``AgentCard`` served at
``.well-known/agent-card.json`` and communicate via JSON-RPC
``message/send`` calls.  Wire names are camelCase; Python attributes are
snake_case with aliases.  Models tolerate extra fields from remote peers.
"""

from __future__ import annotations

from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PROTOCOL_VERSION = "0.3.0"
TRANSPORT_JSONRPC = "JSONRPC"
AGENT_CARD_PATH = "/.well-known/agent-card.json"
METHOD_MESSAGE_SEND = "message/send"


def _new_id() -> str:
    return str(uuid4())


class A2AModel(BaseModel):
    """Base for all wire models: camelCase aliases, extras preserved."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump with wire aliases, dropping unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class A2APart(A2AModel):
    """A content part.  Only ``kind == "text"`` with a string ``text`` is interpreted."""

    kind: str | None = None
    text: Any = None

    @property
    def is_text(self) -> bool:
        return self.kind == "text" and isinstance(self.text, str)


class A2AMessage(A2AModel):
    """A message exchanged between agents."""

    role: str = "user"
    parts: list[A2APart] = []
    message_id: str = Field(default_factory=_new_id)
    kind: Literal["message"] = "message"

    @classmethod
    def user_text(cls, text: str) -> A2AMessage:
        """Create a user message with a single text part."""
        return cls(role="user", parts=[A2APart(kind="text", text=text)])


class MessageSendParams(A2AModel):
    """Parameters of the ``message/send`` method."""

    message: A2AMessage


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class A2ATaskStatus(A2AModel):
    state: str = "completed"


class A2AArtifact(A2AModel):
    """A named output bundle produced by a task."""

    artifact_id: str = Field(default_factory=_new_id)
    name: str | None = None
    parts: list[A2APart] = []


class A2ATask(A2AModel):
    """A unit of work returned for an inbound call."""

    id: str = Field(default_factory=_new_id)
    context_id: str = Field(default_factory=_new_id)
    status: A2ATaskStatus = Field(default_factory=A2ATaskStatus)
    artifacts: list[A2AArtifact] = []
    kind: Literal["task"] = "task"

    @classmethod
    def completed_with_text(cls, text: str) -> A2ATask:
        """A completed task holding one artifact with one text part."""
        return cls(
            status=A2ATaskStatus(state="completed"),
            artifacts=[A2AArtifact(name="response", parts=[A2APart(kind="text", text=text)])],
        )


class RemoteTaskStatus(A2AModel):
    state: str | None = None


class RemoteResult(A2AModel):
    """The ``result`` of a remote ``message/send`` call.

    Remote agents answer with a Task (artifacts, maybe history), a Message
    (top-level parts), or a bare status.  Every shape lands here; see
    :func:`a2a_bridge.a2a.client.extract_text` for the normalization order.
    """

    kind: str | None = None
    id: str | int | None = None
    role: str | None = None
    status: RemoteTaskStatus | None = None
    artifacts: list[A2AArtifact] | None = None
    parts: list[A2APart] | None = None
    history: list[A2AMessage] | None = None


# ---------------------------------------------------------------------------
# Agent Discovery
# ---------------------------------------------------------------------------
#
# Remote cards come from arbitrary peers.  Only ``url`` and ``name`` matter
# for a call, so malformed optional fields fall back to empty values instead
# of failing validation.


def _text_or_none(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _text_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class AgentSkill(A2AModel):
    """A single skill advertised by an agent."""

    id: str = ""
    name: str = ""
    description: str = ""
    tags: list[str] = []

    @field_validator("id", "name", "description", mode="before")
    @classmethod
    def _lenient_text(cls, value: Any) -> str:
        return _text_or_none(value) or ""

    @field_validator("tags", mode="before")
    @classmethod
    def _lenient_tags(cls, value: Any) -> list[str]:
        return _text_list(value)


class AgentCapabilities(A2AModel):
    streaming: bool = False

    @field_validator("streaming", mode="before")
    @classmethod
    def _strict_flag(cls, value: Any) -> bool:
        return value is True


class AgentCard(A2AModel):
    """Agent metadata served at ``.well-known/agent-card.json``.

    Remote cards are parsed leniently: every field has a default, and a
    field of the wrong type is replaced by an empty value.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str = ""
    url: str | None = None
    version: str | None = None
    protocol_version: str | None = PROTOCOL_VERSION
    preferred_transport: str | None = TRANSPORT_JSONRPC
    capabilities: AgentCapabilities = Field(default_factory=AgentCapabilities)
    default_input_modes: list[str] = ["text/plain"]
    default_output_modes: list[str] = ["text/plain"]
    skills: list[AgentSkill] = []
    security_schemes: dict[str, Any] | None = None
    security: list[Any] | None = None

    @field_validator(
        "name", "url", "version", "protocol_version", "preferred_transport", mode="before"
    )
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, value: Any) -> str:
        return _text_or_none(value) or ""

    @field_validator("default_input_modes", "default_output_modes", mode="before")
    @classmethod
    def _modes(cls, value: Any) -> list[str]:
        return _text_list(value)

    @field_validator("capabilities", mode="before")
    @classmethod
    def _capabilities(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, AgentCapabilities)) else {}

    @field_validator("skills", mode="before")
    @classmethod
    def _skills(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        return [skill for skill in value if isinstance(skill, (dict, AgentSkill))]

    @field_validator("security_schemes", mode="before")
    @classmethod
    def _schemes(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @field_validator("security", mode="before")
    @classmethod
    def _security(cls, value: Any) -> Any:
        return value if isinstance(value, list) else None


# ---------------------------------------------------------------------------
# JSON-RPC envelope
# ---------------------------------------------------------------------------


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Any = None


class JsonRpcRequest(BaseModel):
    """JSON-RPC request for an A2A method."""

    jsonrpc: str = "2.0"
    method: str = METHOD_MESSAGE_SEND
    id: str | int | None = 1
    params: dict[str, Any] = {}


class JsonRpcResponse(BaseModel):
    """JSON-RPC response.  Exactly one of ``result`` / ``error`` is set."""

    jsonrpc: str = "2.0"
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request_id: Any, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, error: JsonRpcError) -> JsonRpcResponse:
        return cls(id=request_id, error=error)

    def to_wire(self) -> dict[str, Any]:
        """Dump for the wire: ``id`` always present, one of result/error."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        data["id"] = self.id
        return data


class RemoteRpcResponse(BaseModel):
    """A remote agent's reply to ``message/send``, parsed leniently."""

    model_config = ConfigDict(extra="allow")

    jsonrpc: str = "2.0"
    id: Any = None
    result: RemoteResult | None = None
    error: dict[str, Any] | None = None
