"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from a2a_bridge.cli_commands.agents import agents
    from a2a_bridge.cli_commands.card import card_cmd
    from a2a_bridge.cli_commands.serve import serve
    from a2a_bridge.cli_commands.tools import tools

    cli.add_command(serve)
    cli.add_command(card_cmd)
    cli.add_command(agents)
    cli.add_command(tools)
