"""``a2a-bridge tools`` — inspect the tools the bridge registers."""

from __future__ import annotations

import json

import click

from a2a_bridge.cli_commands._output import console, load_context_config, print_tools_table


@click.group()
def tools() -> None:
    """Inspect registered tools."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output function schemas as JSON.")
@click.pass_context
def list_tools(ctx: click.Context, as_json: bool) -> None:
    """List the tools exposed to the local assistant."""
    from a2a_bridge.bridge import A2ABridge
    from a2a_bridge.tools.dispatcher import ToolDispatcher

    dispatcher = ToolDispatcher()
    A2ABridge(load_context_config(ctx)).register_tools(dispatcher)
    schemas = dispatcher.all_tools()

    if as_json:
        console.print_json(json.dumps(schemas))
    else:
        print_tools_table(schemas)
