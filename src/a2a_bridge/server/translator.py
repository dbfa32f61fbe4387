"""InboundTranslator — ``message/send`` in, completed A2A Task out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from a2a_bridge.a2a.models import A2ATask
from a2a_bridge.errors import InternalError, InvalidParamsError, UpstreamError

if TYPE_CHECKING:
    from a2a_bridge.server.completions import ChatCompleter

logger = logging.getLogger(__name__)


def _is_text_part(part: Any) -> bool:
    return isinstance(part, dict) and part.get("kind") == "text" and isinstance(part.get("text"), str)


def collect_text(params: Any) -> str:
    """Join the text parts of ``params.message`` with newlines.

    A text part has ``kind == "text"`` and a string ``text``; every other
    part is skipped.

    Raises:
        InvalidParamsError: When the message or its parts are missing or
            malformed, or carry no text.
    """
    message = params.get("message") if isinstance(params, dict) else None
    parts = message.get("parts") if isinstance(message, dict) else None
    if parts is None:
        raise InvalidParamsError("missing message.parts")
    if not isinstance(parts, list):
        raise InvalidParamsError("malformed message.parts")

    text = "\n".join(part["text"] for part in parts if _is_text_part(part))
    if not text.strip():
        raise InvalidParamsError("empty message text")
    return text


class InboundTranslator:
    """Forwards one inbound message to the host and wraps the reply as a Task.

    Stateless: every call produces a task with fresh ids and nothing is
    remembered between calls.
    """

    def __init__(self, completer: ChatCompleter) -> None:
        self._completer = completer

    async def translate(self, params: Any) -> A2ATask:
        text = collect_text(params)
        logger.info("A2A bridge: forwarding message to chat completions (%d chars)", len(text))

        try:
            reply = await self._completer.complete(text)
        except UpstreamError as exc:
            logger.error("A2A bridge: chat completions failed: %s", exc)
            raise InternalError(_redacted(exc)) from exc

        return A2ATask.completed_with_text(reply)


def _redacted(exc: UpstreamError) -> str:
    """What the inbound caller may see of an upstream failure."""
    if exc.status is None:
        return "upstream unavailable"
    if 200 <= exc.status < 300:
        return "upstream returned an invalid response"
    return f"upstream returned {exc.status}"
