"""
observability/__init__.py

PURPOSE: Opt-in OpenTelemetry tracing of API requests.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk (optional)

ARCHITECTURE NOTES:
- No-op unless init_telemetry() or use_global_provider() is called
- Console export by default when enabled
- OTLP export when an endpoint is configured
"""

from openai_rest.observability.telemetry import (
    get_tracer,
    init_telemetry,
    is_enabled,
    shutdown_telemetry,
    use_global_provider,
)

__all__ = [
    "get_tracer",
    "init_telemetry",
    "is_enabled",
    "shutdown_telemetry",
    "use_global_provider",
]
