"""Inbound side: credential checks, JSON-RPC dispatch and translation."""

from a2a_bridge.server.auth import Credentials, SecretAuthenticator
from a2a_bridge.server.completions import ChatCompleter, ChatCompletionsClient
from a2a_bridge.server.dispatcher import InboundDispatcher, InboundRequest, RpcReply
from a2a_bridge.server.transport import HttpRequest, HttpResponse, RouteRegistrar
from a2a_bridge.server.translator import InboundTranslator

__all__ = [
    "ChatCompleter",
    "ChatCompletionsClient",
    "Credentials",
    "HttpRequest",
    "HttpResponse",
    "InboundDispatcher",
    "InboundRequest",
    "InboundTranslator",
    "RouteRegistrar",
    "RpcReply",
    "SecretAuthenticator",
]
