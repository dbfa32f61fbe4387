"""Tool seams: providers that own tools, and registrars that host them.

A :class:`ToolProvider` exposes tools; a :class:`ToolRegistrar` is whatever
the host runtime offers for registering ``(name, schema, async executor)``
triples.  :func:`register_provider` connects the two.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from a2a_bridge.tools.models import ToolResult, ToolSpec

ToolExecutor = Callable[[dict[str, Any]], Awaitable["ToolResult"]]


@runtime_checkable
class ToolProvider(Protocol):
    """Owns a fixed set of tools and executes them by name."""

    def tool_specs(self) -> list[ToolSpec]:
        """Return the provider's tools."""
        ...

    async def execute_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Execute a tool by name and return its result."""
        ...


@runtime_checkable
class ToolRegistrar(Protocol):
    """Accepts tools from the bridge."""

    def register_tool(self, spec: ToolSpec, executor: ToolExecutor) -> None: ...


def register_provider(registrar: ToolRegistrar, provider: ToolProvider) -> list[str]:
    """Register every tool of *provider* on *registrar*; return the names."""
    names: list[str] = []
    for spec in provider.tool_specs():
        registrar.register_tool(spec, _bind(provider, spec.name))
        names.append(spec.name)
    return names


def _bind(provider: ToolProvider, name: str) -> ToolExecutor:
    async def execute(arguments: dict[str, Any]) -> ToolResult:
        return await provider.execute_tool(name, arguments)

    return execute
