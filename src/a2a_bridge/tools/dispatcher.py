"""ToolDispatcher — an in-process :class:`ToolRegistrar` that routes calls by name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from a2a_bridge.errors import BridgeError
from a2a_bridge.utils.telemetry import ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from a2a_bridge.tools.models import ToolResult, ToolSpec
    from a2a_bridge.tools.provider import ToolExecutor

_tracer = get_tracer(__name__)


class ToolNotFoundError(BridgeError):
    """Requested tool is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ToolDispatcher:
    """Maintains a name-to-executor map and dispatches tool calls.

    Usage::

        dispatcher = ToolDispatcher()
        bridge.register_tools(dispatcher)

        tools = dispatcher.all_tools()                      # function schemas
        result = await dispatcher.execute("a2a_list_remote_agents", {})
    """

    def __init__(self) -> None:
        self._executors: dict[str, ToolExecutor] = {}
        self._specs: dict[str, ToolSpec] = {}

    def register_tool(self, spec: ToolSpec, executor: ToolExecutor) -> None:
        self._executors[spec.name] = executor
        self._specs[spec.name] = spec

    def all_tools(self) -> list[dict[str, Any]]:
        """Return every registered tool as an OpenAI-compatible function schema."""
        return [spec.to_function_schema() for spec in self._specs.values()]

    async def execute(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Route a single tool call to its executor."""
        executor = self._executors.get(name)
        if executor is None:
            raise ToolNotFoundError(name)
        with _tracer.start_as_current_span("a2a.tool.execute") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            return await executor(arguments or {})

