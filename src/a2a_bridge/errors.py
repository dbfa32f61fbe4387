"""Shared error types for the bridge.

Inbound failures map onto JSON-RPC error objects through
:meth:`ProtocolError.to_rpc_error`; outbound failures are reported to the tool
caller as plain text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from a2a_bridge.a2a.models import JsonRpcError


class BridgeError(Exception):
    """Base error for all bridge failures."""


class ConfigError(BridgeError):
    """Configuration is unreadable, invalid, or references an unknown agent."""


# ---------------------------------------------------------------------------
# Inbound (JSON-RPC) errors
# ---------------------------------------------------------------------------


class ProtocolError(BridgeError):
    """A request that maps to a JSON-RPC error object."""

    code: int = -32603

    def __init__(self, message: str, *, code: int | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(message)

    def to_rpc_error(self) -> JsonRpcError:
        from a2a_bridge.a2a.models import JsonRpcError

        return JsonRpcError(code=self.code, message=self.message)


class AuthError(ProtocolError):
    """Credential missing or mismatched. Never carries diagnostic detail."""

    code = -32000

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class ParseError(ProtocolError):
    code = -32700

    def __init__(self) -> None:
        super().__init__("Parse error")


class InvalidRequestError(ProtocolError):
    code = -32600


class MethodNotFoundError(ProtocolError):
    code = -32601

    def __init__(self, method: object) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class InvalidParamsError(ProtocolError):
    code = -32602

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid params: {detail}")


class InternalError(ProtocolError):
    code = -32603

    def __init__(self, detail: str = "") -> None:
        super().__init__("Internal error" + (f": {detail}" if detail else ""))


# ---------------------------------------------------------------------------
# Collaborator errors
# ---------------------------------------------------------------------------


class UpstreamError(BridgeError):
    """The host chat-completions service failed or timed out.

    ``status`` is ``None`` when no HTTP response was received.  ``detail``
    holds the upstream body and is for server-side logs only.
    """

    def __init__(self, status: int | None, detail: str = "") -> None:
        self.status = status
        self.detail = detail
        where = f"status {status}" if status is not None else "no response"
        super().__init__(f"Upstream failure ({where})" + (f": {detail}" if detail else ""))


class RemoteAgentError(BridgeError):
    """Discovery of, or a call to, an external A2A agent failed."""

    def __init__(self, detail: str, *, code: int | None = None) -> None:
        self.detail = detail
        self.code = code
        super().__init__(detail)
