"""``a2a-bridge agents`` — list, discover and call remote A2A agents."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import click

from a2a_bridge.cli_commands._output import (
    console,
    load_context_config,
    print_agents_table,
    print_tool_result,
)
from a2a_bridge.tools.remote_agents import CALL_REMOTE, DISCOVER_REMOTE, LIST_REMOTE

if TYPE_CHECKING:
    from a2a_bridge.tools.models import ToolResult


def _run_tool(ctx: click.Context, name: str, arguments: dict[str, Any]) -> ToolResult:
    """Register the bridge tools on an in-process dispatcher and run *name*."""
    from a2a_bridge.bridge import A2ABridge
    from a2a_bridge.tools.dispatcher import ToolDispatcher

    dispatcher = ToolDispatcher()
    A2ABridge(load_context_config(ctx)).register_tools(dispatcher)
    return asyncio.run(dispatcher.execute(name, arguments))


@click.group()
def agents() -> None:
    """Work with configured remote A2A agents."""


@agents.command("list")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format.",
)
@click.pass_context
def list_agents(ctx: click.Context, fmt: str) -> None:
    """List the remote agents in the config."""
    result = _run_tool(ctx, LIST_REMOTE, {})
    if fmt == "json":
        print_tool_result(result, as_json=True)
        return

    payload = result.payload()
    if not payload["agents"]:
        console.print("[yellow]No remote agents configured.[/yellow]")
        return
    print_agents_table(payload["agents"])


@agents.command("discover")
@click.argument("agent")
@click.pass_context
def discover(ctx: click.Context, agent: str) -> None:
    """Fetch and print the agent card of AGENT."""
    print_tool_result(_run_tool(ctx, DISCOVER_REMOTE, {"agent": agent}), as_json=True)


@agents.command("call")
@click.argument("agent")
@click.argument("message")
@click.option("--json", "as_json", is_flag=True, help="Output the raw tool payload.")
@click.pass_context
def call(ctx: click.Context, agent: str, message: str, as_json: bool) -> None:
    """Send MESSAGE to AGENT and print its reply."""
    print_tool_result(
        _run_tool(ctx, CALL_REMOTE, {"agent": agent, "message": message}),
        as_json=as_json,
    )
