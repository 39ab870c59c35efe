"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from taskhub.shared.telemetry.logging import setup_logging
from taskhub.shared.telemetry.telemetry import TelemetryConfig
from taskhub.shared.telemetry.tracing import add_span_attributes, get_trace_id, traced

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "traced",
    "add_span_attributes",
    "get_trace_id",
]
