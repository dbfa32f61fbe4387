"""ChatCompletionsClient — the host's private chat-completions endpoint.

Only single-turn, non-streaming calls are made: one user message in, the
first choice's content out.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from a2a_bridge.errors import UpstreamError
from a2a_bridge.utils.telemetry import (
    ATTR_TEXT_LENGTH,
    ATTR_UPSTREAM_MODEL,
    ATTR_UPSTREAM_STATUS,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

COMPLETIONS_PATH = "/v1/chat/completions"
COMPLETION_TIMEOUT = 120.0
NO_RESPONSE_TEXT = "No response."


@runtime_checkable
class ChatCompleter(Protocol):
    """Anything that turns one user message into one assistant reply."""

    async def complete(self, text: str) -> str:
        """Return the reply text; raise :class:`UpstreamError` on failure."""
        ...


class ChatCompletionsClient:
    """Calls ``POST {base_url}/v1/chat/completions`` with a bearer token."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str = "",
        model: str = "openclaw",
        timeout: float = COMPLETION_TIMEOUT,
    ) -> None:
        self.url = base_url.rstrip("/") + COMPLETIONS_PATH
        self.model = model
        self.timeout = timeout
        self._token = token

    def build_payload(self, text: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "stream": False,
            "messages": [{"role": "user", "content": text}],
        }

    async def complete(self, text: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token}",
        }
        with _tracer.start_as_current_span("a2a.upstream.complete") as span:
            span.set_attribute(ATTR_UPSTREAM_MODEL, self.model)
            span.set_attribute(ATTR_TEXT_LENGTH, len(text))

            async with httpx.AsyncClient(timeout=self.timeout) as client:
                try:
                    response = await asyncio.wait_for(
                        client.post(self.url, json=self.build_payload(text), headers=headers),
                        timeout=self.timeout,
                    )
                except (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException) as exc:
                    raise UpstreamError(None, f"timed out after {self.timeout:g}s") from exc
                except httpx.HTTPError as exc:
                    raise UpstreamError(None, str(exc)) from exc

            span.set_attribute(ATTR_UPSTREAM_STATUS, response.status_code)
            if not response.is_success:
                raise UpstreamError(response.status_code, response.text)

            try:
                completion = response.json()
            except ValueError as exc:
                raise UpstreamError(response.status_code, "response body is not JSON") from exc

        return extract_content(completion)


def extract_content(completion: Any) -> str:
    """``choices[0].message.content``, or ``"No response."`` when absent."""
    try:
        content = completion["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return NO_RESPONSE_TEXT
    if content is None:
        return NO_RESPONSE_TEXT
    return content if isinstance(content, str) else str(content)
