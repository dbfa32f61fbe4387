"""``a2a-bridge card`` — print the agent card this bridge would serve."""

from __future__ import annotations

import json

import click

from a2a_bridge.a2a.card import build_agent_card
from a2a_bridge.cli_commands._output import console, load_context_config, print_card_table


@click.command("card")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"]),
    default="json",
    help="Output format.",
)
@click.pass_context
def card_cmd(ctx: click.Context, fmt: str) -> None:
    """Print the local agent card."""
    card = build_agent_card(load_context_config(ctx))
    if fmt == "json":
        console.print_json(json.dumps(card.to_wire()))
    else:
        print_card_table(card)
