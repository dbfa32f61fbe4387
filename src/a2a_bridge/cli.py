"""a2a-bridge CLI entrypoint."""

from __future__ import annotations

from pathlib import Path

import click

from a2a_bridge import __version__


@click.group()
@click.version_option(version=__version__, prog_name="a2a-bridge")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    envvar="A2A_BRIDGE_CONFIG",
    default=None,
    help="Bridge config YAML (env: A2A_BRIDGE_CONFIG).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """A2A Bridge: the A2A protocol in front of a chat-completions assistant."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_level"] = log_level


# Register subcommands
from a2a_bridge.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
