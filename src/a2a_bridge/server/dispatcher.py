"""InboundDispatcher — authenticates and routes raw JSON-RPC envelopes.

The dispatcher is transport-agnostic: it takes the HTTP verb, the raw body
bytes and the presented :class:`~a2a_bridge.server.auth.Credentials`, and
returns an :class:`RpcReply` (status code + JSON-RPC response).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from a2a_bridge.a2a.models import METHOD_MESSAGE_SEND, JsonRpcResponse
from a2a_bridge.errors import (
    AuthError,
    InternalError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
)
from a2a_bridge.server.auth import Credentials
from a2a_bridge.utils.telemetry import (
    ATTR_HTTP_STATUS,
    ATTR_RPC_ERROR_CODE,
    ATTR_RPC_METHOD,
    ATTR_TASK_ID,
    get_tracer,
)

if TYPE_CHECKING:
    from a2a_bridge.server.auth import SecretAuthenticator
    from a2a_bridge.server.translator import InboundTranslator

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


@dataclass(frozen=True)
class InboundRequest:
    http_method: str
    body: bytes
    credentials: Credentials = field(default_factory=Credentials)


@dataclass(frozen=True)
class RpcReply:
    status_code: int
    payload: JsonRpcResponse

    @property
    def ok(self) -> bool:
        return self.payload.error is None


def _reject(status_code: int, error: ProtocolError, request_id: Any = None) -> RpcReply:
    return RpcReply(status_code, JsonRpcResponse.failure(request_id, error.to_rpc_error()))


class InboundDispatcher:
    """Validates inbound JSON-RPC and hands ``message/send`` to the translator.

    Checks run in a fixed order: credentials, HTTP verb, JSON parsing, method
    name.  Anything rejected before parsing is answered with a ``null`` id.
    """

    def __init__(self, authenticator: SecretAuthenticator, translator: InboundTranslator) -> None:
        self._authenticator = authenticator
        self._translator = translator

    async def dispatch(self, request: InboundRequest) -> RpcReply:
        with _tracer.start_as_current_span("a2a.dispatch") as span:
            reply = await self._dispatch(request, span)
            span.set_attribute(ATTR_HTTP_STATUS, reply.status_code)
            if reply.payload.error is not None:
                span.set_attribute(ATTR_RPC_ERROR_CODE, reply.payload.error.code)
            return reply

    async def _dispatch(self, request: InboundRequest, span: Any) -> RpcReply:
        if not self._authenticator.is_authorized(request.credentials):
            logger.warning(
                "A2A bridge: rejected unauthorized request (credentials %s)",
                "presented" if request.credentials.present else "missing",
            )
            return _reject(401, AuthError())

        if request.http_method.upper() != "POST":
            return _reject(405, InvalidRequestError("Method not allowed, use POST"))

        try:
            envelope = json.loads(request.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return _reject(400, ParseError())

        if not isinstance(envelope, dict):
            return _reject(400, InvalidRequestError("Invalid Request"))

        request_id = envelope.get("id")
        method = envelope.get("method")
        span.set_attribute(ATTR_RPC_METHOD, str(method))

        if method != METHOD_MESSAGE_SEND:
            return _reject(200, MethodNotFoundError(method), request_id)

        try:
            task = await self._translator.translate(envelope.get("params"))
        except ProtocolError as exc:
            return _reject(200, exc, request_id)
        except Exception:
            logger.exception("A2A bridge: unexpected failure handling %s", method)
            return _reject(200, InternalError(), request_id)

        span.set_attribute(ATTR_TASK_ID, task.id)
        return RpcReply(200, JsonRpcResponse.success(request_id, task.to_wire()))
