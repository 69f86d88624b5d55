"""
telemetry.py

PURPOSE: Opt-in OpenTelemetry tracing for API requests.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk, opentelemetry-exporter-otlp (all optional)

ARCHITECTURE NOTES:
The library must import and run without any otel package installed.
Modules grab a tracer at import time through get_tracer(); the tracer
resolves to the real otel tracer only once init_telemetry() has configured
a provider, and to a no-op tracer otherwise.

Applications that already run their own TracerProvider do not need
init_telemetry(): call use_global_provider() and spans flow into it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from openai_rest.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

_enabled = False
_tracer_provider: object | None = None


@runtime_checkable
class Span(Protocol):
    """The subset of the otel span API used by the client."""

    def __enter__(self) -> Span: ...
    def __exit__(self, *args: object) -> None: ...
    def set_attribute(self, key: str, value: object) -> None: ...
    def record_exception(self, exception: BaseException) -> None: ...


@runtime_checkable
class Tracer(Protocol):
    def start_as_current_span(self, name: str, **kwargs: object) -> Span: ...


class NoOpSpan:
    """Span used while tracing is off."""

    def __enter__(self) -> Span:
        return self

    def __exit__(self, *args: object) -> None:
        pass

    def set_attribute(self, key: str, value: object) -> None:  # noqa: ARG002
        pass

    def record_exception(self, exception: BaseException) -> None:  # noqa: ARG002
        pass


class NoOpTracer:
    def start_as_current_span(
        self,
        name: str,  # noqa: ARG002
        **kwargs: object,  # noqa: ARG002
    ) -> Span:
        return NoOpSpan()


class LazyTracer:
    """
    Tracer that looks up the real otel tracer on every span.

    Lets modules create their tracer at import time, before the application
    has decided whether tracing is on.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    def _resolve(self) -> Tracer:
        if not _enabled:
            return NoOpTracer()

        try:
            from opentelemetry import trace
        except ImportError:
            return NoOpTracer()

        return trace.get_tracer(self._name)  # type: ignore[return-value]

    def start_as_current_span(self, name: str, **kwargs: object) -> Span:
        return self._resolve().start_as_current_span(name, **kwargs)


def init_telemetry(settings: OpenTelemetrySettings) -> bool:
    """
    Configure a tracer provider from settings.

    Safe to call when otel is not installed; tracing then stays off.

    Args:
        settings: OpenTelemetry configuration settings.

    Returns:
        True if tracing is active afterwards.
    """
    global _enabled, _tracer_provider

    if _tracer_provider is not None:
        logger.debug("Telemetry already initialized")
        return _enabled

    if not settings.enabled:
        logger.debug("Telemetry disabled")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
    except ImportError:
        logger.warning(
            "OpenTelemetry packages not installed. "
            "Install with: pip install openai-rest[observability]"
        )
        return False

    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))

    if settings.endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError:
            logger.warning("OTLP exporter not available, falling back to console export")
            provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        else:
            provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.endpoint))
            )
            logger.info(f"OTLP exporter configured: {settings.endpoint}")
    else:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer_provider = provider
    _enabled = True

    logger.info(f"Telemetry initialized: service={settings.service_name}")
    return True


def use_global_provider() -> None:
    """Send spans to whatever global tracer provider the application set up."""
    global _enabled
    _enabled = True


def is_enabled() -> bool:
    return _enabled


def get_tracer(name: str) -> Tracer:
    """
    Get a tracer for the given module name.

    Args:
        name: Module name (typically __name__).

    Returns:
        A LazyTracer that resolves to a real or no-op tracer per span.
    """
    return LazyTracer(name)


def shutdown_telemetry() -> None:
    """Flush and drop the provider created by init_telemetry(), if any."""
    global _enabled, _tracer_provider

    if _tracer_provider is not None:
        try:
            from opentelemetry.sdk.trace import TracerProvider
        except ImportError:
            pass
        else:
            if isinstance(_tracer_provider, TracerProvider):
                _tracer_provider.shutdown()
                logger.debug("Telemetry shutdown complete")

    _tracer_provider = None
    _enabled = False
