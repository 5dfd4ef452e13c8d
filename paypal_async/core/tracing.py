import os

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

log = structlog.get_logger(__name__)


def init_tracer(service_name: str = "paypal-async") -> TracerProvider:
    """Initialize OpenTelemetry tracer with OTLP exporter.

    Spans for every ``Client.execute`` call are recorded through the global
    tracer provider installed here.
    """
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))

    # Allow disabling the OTLP exporter via environment variable (useful in tests)
    if os.getenv("DISABLE_TRACING", "").lower() in {"1", "true", "yes"}:
        exporter = ConsoleSpanExporter()
    else:
        try:
            exporter = OTLPSpanExporter()
        except Exception as exc:  # pragma: no cover - only hit when the collector config is broken
            log.warning("OTLP exporter unavailable, tracing to console", error=str(exc))
            exporter = ConsoleSpanExporter()

    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return provider
