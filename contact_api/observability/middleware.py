"""
Observability Middleware

Request-level telemetry for the contact API: per-request timing, one
structured log record per response and the X-Trace-Id correlation header.
"""

import time
import logging
from typing import Optional

from flask import Flask, Response, request, g
from opentelemetry import trace
from opentelemetry.instrumentation.flask import FlaskInstrumentor

logger = logging.getLogger(__name__)

TRACE_ID_HEADER = "X-Trace-Id"


def current_trace_id() -> Optional[str]:
    """Hex trace id of the active span, or None when nothing is recorded."""
    span = trace.get_current_span()
    if not span.is_recording():
        return None
    return format(span.get_span_context().trace_id, "032x")


def _log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def add_observability_middleware(app: Flask, instrument: bool = True) -> None:
    """
    Attach request telemetry hooks to the app.

    Args:
        app: Flask application
        instrument: Also apply OpenTelemetry Flask auto-instrumentation
    """
    if instrument:
        FlaskInstrumentor().instrument_app(app)

    @app.before_request
    def open_request_telemetry():
        g.request_started = time.perf_counter()
        g.trace_id = current_trace_id()
        if g.trace_id:
            trace.get_current_span().set_attribute("contact.endpoint", request.endpoint or "unmatched")

    @app.after_request
    def close_request_telemetry(response: Response) -> Response:
        elapsed_ms = round((time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000, 2)

        if g.get("trace_id"):
            trace.get_current_span().set_attribute("contact.duration_ms", elapsed_ms)
            response.headers[TRACE_ID_HEADER] = g.trace_id

        # Preflights are frequent and carry no payload
        level = logging.DEBUG if request.method == "OPTIONS" else _log_level(response.status_code)
        logger.log(
            level,
            "HTTP request completed",
            extra={
                "extra_fields": {
                    "method": request.method,
                    "endpoint": request.endpoint,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                    "trace_id": g.get("trace_id")
                }
            }
        )
        return response
