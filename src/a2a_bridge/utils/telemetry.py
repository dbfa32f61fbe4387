"""OpenTelemetry tracing helpers for the bridge.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether the SDK is
installed.  When the SDK is *not* configured the API returns no-op
implementations.

Usage::

    from a2a_bridge.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("a2a.remote.call") as span:
        span.set_attribute(ATTR_REMOTE_AGENT, agent_id)

To activate real tracing, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install a2a-bridge[otel]``).
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used throughout the bridge
# ---------------------------------------------------------------------------

ATTR_RPC_METHOD = "a2a.rpc.method"
ATTR_RPC_ERROR_CODE = "a2a.rpc.error_code"
ATTR_HTTP_STATUS = "a2a.http.status"
ATTR_TASK_ID = "a2a.task.id"
ATTR_TEXT_LENGTH = "a2a.text.length"
ATTR_UPSTREAM_MODEL = "a2a.upstream.model"
ATTR_UPSTREAM_STATUS = "a2a.upstream.status"
ATTR_REMOTE_AGENT = "a2a.remote.agent"
ATTR_REMOTE_URL = "a2a.remote.url"
ATTR_TOOL_NAME = "a2a.tool.name"

_INSTRUMENTATION_NAME = "a2a_bridge"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "a2a-bridge",
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider (requires ``a2a-bridge[otel]``).

    Spans go to *otlp_endpoint* over OTLP/gRPC when one is given, otherwise
    to stdout.  The resource carries the bridge version.

    Raises:
        ImportError: If the SDK, or the OTLP exporter when an endpoint is
            given, is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install a2a-bridge[otel]"
        )
        raise ImportError(msg) from exc

    from a2a_bridge import __version__

    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name, "service.version": __version__})
    )
    provider.add_span_processor(_span_processor(otlp_endpoint))
    trace.set_tracer_provider(provider)


def _span_processor(otlp_endpoint: str | None) -> Any:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    if not otlp_endpoint:
        return SimpleSpanProcessor(ConsoleSpanExporter())

    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = (
            "opentelemetry-exporter-otlp is required to export to "
            f"{otlp_endpoint}. Install it with: pip install a2a-bridge[otel]"
        )
        raise ImportError(msg) from exc
    return BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))
