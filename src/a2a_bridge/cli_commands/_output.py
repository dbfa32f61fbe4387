"""Shared CLI helpers and output formatters."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table

from a2a_bridge.config import load_config
from a2a_bridge.errors import ConfigError

if TYPE_CHECKING:
    from a2a_bridge.a2a.models import AgentCard
    from a2a_bridge.config import BridgeConfig
    from a2a_bridge.tools.models import ToolResult

console = Console()


def load_context_config(ctx: click.Context) -> BridgeConfig:
    """Load the config named on the root command, exiting on errors."""
    obj: dict[str, Any] = ctx.find_root().obj or {}
    try:
        return load_config(obj.get("config_path"))
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)


def print_tool_result(result: ToolResult, *, as_json: bool = False) -> None:
    """Print a JSON tool result; errors in red, exit code 1."""
    payload = result.payload()
    if result.is_error:
        console.print(f"[red]Error:[/red] {payload['error']}")
        known = payload.get("known_agents")
        if known is not None:
            console.print(f"Known agents: {', '.join(known) or 'none'}")
        sys.exit(1)
    if as_json:
        console.print_json(result.text)
        return
    if "response" in payload:
        console.print(f"[bold]{payload['agentName']}[/bold] ({payload['agent']}):")
        console.print(payload["response"], markup=False)
    else:
        console.print_json(result.text)


def print_agents_table(agents: list[dict[str, Any]]) -> None:
    """Pretty-print configured remote agents as a table."""
    table = Table(title="Remote A2A Agents")
    table.add_column("ID", style="cyan")
    table.add_column("Alias")
    table.add_column("URL")

    for agent in agents:
        table.add_row(agent["id"], agent.get("alias") or "-", agent.get("url") or "-")

    console.print(table)


def print_card_table(card: AgentCard) -> None:
    """Pretty-print an agent card summary and its skills."""
    console.print(f"\n[bold]{card.name}[/bold] v{card.version or '?'}")
    console.print(f"  URL: {card.url}")
    console.print(f"  Protocol: {card.protocol_version} ({card.preferred_transport})")
    console.print(f"  Streaming: {card.capabilities.streaming}")
    console.print(f"  Auth: {'bearer' if card.security_schemes else 'none'}")

    table = Table(title="Skills")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description")
    for skill in card.skills:
        table.add_row(skill.id, skill.name, _truncate(skill.description))
    console.print(table)


def print_tools_table(tools: list[dict[str, Any]]) -> None:
    """Pretty-print a list of tool schemas as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for tool in tools:
        func = tool.get("function", {})
        table.add_row(
            func.get("name", "?"),
            _truncate(func.get("description", "")),
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
