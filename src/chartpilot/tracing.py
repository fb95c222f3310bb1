"""Optional OpenTelemetry tracing for chart generation."""

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from chartpilot.config.env import get_env_bool

logger = logging.getLogger(__name__)

TRACE_ENV_VAR = "CHARTPILOT_TRACE_GENERATION"
SPAN_NAME = "chartpilot.generate"


def is_otel_exporter_configured() -> bool:
    """Return True when OTEL exporter environment indicates external export is configured."""
    try:
        if get_env_bool("OTEL_DISABLE_EXPORTER", False):
            return False
    except ValueError:
        logger.warning("Invalid OTEL_DISABLE_EXPORTER value; treating exporter as enabled.")

    endpoint = (os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT") or "").strip()
    traces_endpoint = (os.getenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT") or "").strip()
    return bool(endpoint or traces_endpoint)


def trace_enabled() -> bool:
    """Return True when generation tracing is enabled or OTEL exporter defaults apply."""
    raw = os.getenv(TRACE_ENV_VAR)
    if raw is not None:
        try:
            return get_env_bool(TRACE_ENV_VAR, False) is True
        except ValueError:
            logger.warning("Invalid %s value '%s'; tracing disabled.", TRACE_ENV_VAR, raw)
            return False
    return is_otel_exporter_configured()


@contextmanager
def trace_generation(chart_format: str, row_count: int, column_count: int) -> Iterator[Optional[Any]]:
    """Wrap one generation in a ``chartpilot.generate`` span.

    Yields the span (or None when tracing is disabled) so callers can attach
    the inferred chart type.
    """
    if not trace_enabled():
        yield None
        return

    from opentelemetry import trace

    tracer = trace.get_tracer("chartpilot")
    with tracer.start_as_current_span(SPAN_NAME) as span:
        span.set_attribute("chartpilot.format", chart_format)
        span.set_attribute("chartpilot.row_count", row_count)
        span.set_attribute("chartpilot.column_count", column_count)
        try:
            yield span
        except Exception as exc:
            span.set_attribute("chartpilot.status", "error")
            span.set_attribute("chartpilot.error_type", type(exc).__name__)
            raise
        span.set_attribute("chartpilot.status", "ok")
