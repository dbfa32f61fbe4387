"""``a2a-bridge serve`` — run the inbound A2A endpoint over HTTP."""

from __future__ import annotations

import click

from a2a_bridge.cli_commands._output import console, load_context_config


@click.command()
@click.option("--host", default=None, help="Bind address (default: server.host from config).")
@click.option("--port", type=int, default=None, help="Bind port (default: server.port from config).")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Serve the agent card and the JSON-RPC endpoint."""
    import uvicorn

    from a2a_bridge.bridge import A2ABridge
    from a2a_bridge.server.asgi import create_app
    from a2a_bridge.utils.logging import configure_logging
    from a2a_bridge.utils.telemetry import configure_telemetry

    config = load_context_config(ctx)
    overrides = {k: v for k, v in {"host": host, "port": port}.items() if v is not None}
    if overrides:
        config = config.model_copy(update={"server": config.server.model_copy(update=overrides)})

    level = ctx.find_root().obj.get("log_level") or config.log_level
    configure_logging(level)

    if config.telemetry.enabled:
        try:
            configure_telemetry(otlp_endpoint=config.telemetry.otlp_endpoint)
        except ImportError as exc:
            console.print(f"[yellow]Telemetry disabled:[/yellow] {exc}")

    bridge = A2ABridge(config)
    app = create_app(bridge)

    console.print(
        f"[bold]{bridge.card.name}[/bold] listening on "
        f"http://{config.server.host}:{config.server.port}{config.server.rpc_path} "
        f"(auth: {'bearer' if config.auth_enabled else 'none'})"
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level=level.lower())
