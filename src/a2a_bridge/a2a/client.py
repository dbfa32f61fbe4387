"""A2AClient — discovers and calls remote agents via the A2A protocol."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import ValidationError

from a2a_bridge.a2a.models import (
    AGENT_CARD_PATH,
    METHOD_MESSAGE_SEND,
    A2AMessage,
    A2APart,
    AgentCard,
    JsonRpcRequest,
    MessageSendParams,
    RemoteResult,
    RemoteRpcResponse,
)
from a2a_bridge.errors import RemoteAgentError
from a2a_bridge.utils.telemetry import (
    ATTR_HTTP_STATUS,
    ATTR_REMOTE_URL,
    ATTR_TEXT_LENGTH,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

DISCOVERY_TIMEOUT = 10.0
CALL_TIMEOUT = 120.0
DEFAULT_RPC_PATH = "/a2a"
NO_RESULT_TEXT = "No result returned."

T = TypeVar("T")


class A2AClient:
    """Talks to one remote A2A agent.

    Usage::

        async with A2AClient("https://agent.example.com", token="s3cret") as client:
            card = await client.fetch_agent_card()
            text = await client.send_message(client.endpoint_for(card), "Hello")
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        discovery_timeout: float = DISCOVERY_TIMEOUT,
        call_timeout: float = CALL_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token or None
        self._discovery_timeout = discovery_timeout
        self._call_timeout = call_timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> A2AClient:
        self._client = httpx.AsyncClient()
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def card_url(self) -> str:
        return self._base_url + AGENT_CARD_PATH

    def endpoint_for(self, card: AgentCard) -> str:
        """The card's ``url``, or ``<base>/a2a`` when the card has none."""
        return card.url or self._base_url + DEFAULT_RPC_PATH

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "A2AClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    async def fetch_agent_card(self) -> AgentCard:
        """GET ``.well-known/agent-card.json`` and parse into an :class:`AgentCard`."""
        raw = await self.fetch_agent_card_raw()
        try:
            return AgentCard.model_validate(raw)
        except ValidationError as exc:
            msg = f"Invalid agent card from {self.card_url}: {exc}"
            raise RemoteAgentError(msg) from exc

    async def fetch_agent_card_raw(self) -> dict[str, Any]:
        """GET ``.well-known/agent-card.json`` and return the JSON object as received."""
        url = self.card_url
        with _tracer.start_as_current_span("a2a.remote.discover") as span:
            span.set_attribute(ATTR_REMOTE_URL, url)
            response = await self._request(
                lambda: self._http().get(url, timeout=self._discovery_timeout),
                timeout=self._discovery_timeout,
                what=f"Failed to fetch agent card from {url}",
            )
            span.set_attribute(ATTR_HTTP_STATUS, response.status_code)
            if not response.is_success:
                msg = f"Failed to fetch agent card from {url}: {response.status_code}"
                raise RemoteAgentError(msg)
            try:
                data = response.json()
            except ValueError as exc:
                msg = f"Invalid agent card from {url}: {exc}"
                raise RemoteAgentError(msg) from exc
        if not isinstance(data, dict):
            msg = f"Invalid agent card from {url}: expected a JSON object"
            raise RemoteAgentError(msg)
        return data

    async def send_message(self, endpoint_url: str, text: str) -> str:
        """POST a ``message/send`` call to *endpoint_url* and return its text."""
        request = JsonRpcRequest(
            method=METHOD_MESSAGE_SEND,
            params=MessageSendParams(message=A2AMessage.user_text(text)).to_wire(),
        )
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        with _tracer.start_as_current_span("a2a.remote.call") as span:
            span.set_attribute(ATTR_REMOTE_URL, endpoint_url)
            span.set_attribute(ATTR_TEXT_LENGTH, len(text))
            response = await self._request(
                lambda: self._http().post(
                    endpoint_url,
                    json=request.model_dump(),
                    headers=headers,
                    timeout=self._call_timeout,
                ),
                timeout=self._call_timeout,
                what="A2A call failed",
            )
            span.set_attribute(ATTR_HTTP_STATUS, response.status_code)

            if not response.is_success:
                msg = f"A2A call failed ({response.status_code}): {response.text}"
                raise RemoteAgentError(msg)

            try:
                rpc_response = RemoteRpcResponse.model_validate(response.json())
            except (ValueError, ValidationError) as exc:
                msg = f"A2A call returned an invalid response: {exc}"
                raise RemoteAgentError(msg) from exc

        if rpc_response.error is not None:
            error = rpc_response.error
            code = error.get("code")
            msg = f"A2A JSON-RPC error: {error.get('message', error)} ({code})"
            raise RemoteAgentError(msg, code=code if isinstance(code, int) else None)

        return extract_text(rpc_response.result)

    @staticmethod
    async def _request(
        send: Callable[[], Awaitable[T]],
        *,
        timeout: float,
        what: str,
    ) -> T:
        """Await *send* under a hard deadline; map every failure to RemoteAgentError."""
        try:
            return await asyncio.wait_for(send(), timeout=timeout)
        except (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException) as exc:
            msg = f"{what}: timed out after {timeout:g}s"
            raise RemoteAgentError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"{what}: {exc}"
            raise RemoteAgentError(msg) from exc


# ---------------------------------------------------------------------------
# Result normalization
# ---------------------------------------------------------------------------


def _texts(parts: Iterable[A2APart] | None, *, skip_empty: bool = True) -> list[str]:
    texts: list[str] = []
    for part in parts or ():
        if part.is_text and (part.text or not skip_empty):
            texts.append(part.text or "")
    return texts


def extract_text(result: RemoteResult | dict[str, Any] | None) -> str:
    """Normalize a remote ``message/send`` result into plain text.

    Tried in order, the first non-empty text wins:

    1. Task artifacts: text parts newline-joined per artifact, artifacts
       separated by a blank line.
    2. Message parts: text parts newline-joined.
    3. History: the last entry, when it was written by the agent.
    4. A status line naming the task id and state.
    """
    if result is None:
        return NO_RESULT_TEXT
    if isinstance(result, dict):
        result = RemoteResult.model_validate(result)

    if result.artifacts:
        blocks = ["\n".join(texts) for art in result.artifacts if (texts := _texts(art.parts))]
        if blocks:
            return "\n\n".join(blocks)

    if result.parts:
        texts = _texts(result.parts)
        if texts:
            return "\n".join(texts)

    if result.history:
        last = result.history[-1]
        if last.role == "agent":
            joined = "\n".join(_texts(last.parts, skip_empty=False))
            if joined:
                return joined

    task_id = result.id if result.id is not None else "?"
    state = result.status.state if result.status and result.status.state else "unknown"
    return f"Task {task_id} completed (status: {state})"
