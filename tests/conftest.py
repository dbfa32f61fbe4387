"""Shared fixtures: fake httpx clients and bridge configs."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from a2a_bridge.config import BridgeConfig, RemoteAgentEntry


def _as_response(value: Any) -> httpx.Response:
    if isinstance(value, httpx.Response):
        return value
    return httpx.Response(200, json=value)


@pytest.fixture
def make_http_client() -> Callable[..., AsyncMock]:
    """Build an ``AsyncMock`` standing in for ``httpx.AsyncClient``.

    ``get`` / ``post`` may be a JSON-able value, an ``httpx.Response``, an
    exception instance, or an async callable used as ``side_effect``.
    """

    def factory(get: Any = None, post: Any = None) -> AsyncMock:
        client = AsyncMock()
        for name, value in (("get", get), ("post", post)):
            if isinstance(value, BaseException) or callable(value):
                setattr(client, name, AsyncMock(side_effect=value))
            else:
                setattr(client, name, AsyncMock(return_value=_as_response(value)))
        client.aclose = AsyncMock()
        client.__aenter__.return_value = client
        client.__aexit__.return_value = False
        return client

    return factory


@pytest.fixture
def remote_card() -> dict[str, Any]:
    return {
        "name": "Vaelor",
        "description": "A remote test agent",
        "url": "https://vaelor.example.com/a2a",
        "protocolVersion": "0.3.0",
        "skills": [{"id": "chat", "name": "Chat", "description": "Talk"}],
        "provider": {"organization": "Example"},
    }


def task_reply(text: str = "Done", request_id: Any = 1) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "result": {
            "kind": "task",
            "id": "task-1",
            "status": {"state": "completed"},
            "artifacts": [{"parts": [{"kind": "text", "text": text}]}],
        },
    }


@pytest.fixture
def remote_task_reply() -> Callable[..., dict[str, Any]]:
    return task_reply


@pytest.fixture
def config_with_agents() -> BridgeConfig:
    return BridgeConfig(
        secret="",
        remote_agents={
            "vaelor": RemoteAgentEntry(
                url="https://vaelor.example.com/", token="vt", alias="Vaelor"
            ),
            "nourl": RemoteAgentEntry(alias="Broken"),
        },
    )
