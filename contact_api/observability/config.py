"""
OpenTelemetry Configuration

Sets up distributed tracing and structured JSON logging for the contact API.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

from ..config import Settings

SAMPLING_RATIOS = {
    'production': 0.1,
    'staging': 0.5,
}

LOG_LEVELS = {
    'production': logging.WARNING,
    'staging': logging.INFO,
    'development': logging.DEBUG,
    'test': logging.WARNING,
}

_tracing_configured = False


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with trace correlation and extra_fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            entry["trace_id"] = format(span_context.trace_id, "032x")
            entry["span_id"] = format(span_context.span_id, "016x")

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            entry.update(extra_fields)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_observability(settings: Optional[Settings] = None):
    """Initialize tracing and logging based on environment configuration."""
    global _tracing_configured
    settings = settings or Settings.from_env()

    setup_structured_logging(settings.environment, settings.log_level)

    if not settings.otel_enabled or settings.environment == 'test' or _tracing_configured:
        return

    sampler = TraceIdRatioBased(SAMPLING_RATIOS.get(settings.environment, 1.0))

    resource = Resource.create({
        "service.name": settings.service_name,
        "service.version": settings.service_version,
        "deployment.environment": settings.environment
    })

    tracer_provider = TracerProvider(sampler=sampler, resource=resource)

    otlp_endpoint = os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT')
    if otlp_endpoint:
        headers = None
        if os.getenv('OTEL_API_KEY'):
            headers = {"Authorization": f"Bearer {os.getenv('OTEL_API_KEY')}"}
        tracer_provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=otlp_endpoint, headers=headers),
                max_export_batch_size=512
            )
        )
    elif settings.environment == 'development':
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(tracer_provider)
    _tracing_configured = True


def setup_structured_logging(environment: str, level_name: Optional[str] = None):
    """Configure structured JSON logging with trace correlation."""
    if level_name:
        log_level = logging.getLevelName(level_name.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    else:
        log_level = LOG_LEVELS.get(environment, logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    root = logging.getLogger()
    root.setLevel(log_level)
    for existing in list(root.handlers):
        if isinstance(existing.formatter, StructuredFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)

    if environment == 'production':
        # Reduce noise, focus on errors and business events
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('werkzeug').setLevel(logging.WARNING)
