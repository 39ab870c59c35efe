"""Span helpers for use-case operations.

Without a configured tracer provider OpenTelemetry hands out non-recording
spans, so everything here is a cheap no-op when telemetry is disabled.
"""

import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Keyword arguments copied onto spans as arg.<name>; others are skipped.
_SPAN_ARG_KEYS = frozenset({"task_id", "status", "name", "event"})


@contextmanager
def _operation_span(
    tracer: trace.Tracer, span_name: str, kwargs: dict[str, Any]
) -> Iterator[None]:
    with tracer.start_as_current_span(span_name, record_exception=False) as span:
        for key in _SPAN_ARG_KEYS.intersection(kwargs):
            span.set_attribute(f"arg.{key}", str(kwargs[key]))
        try:
            yield
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
        span.set_status(Status(StatusCode.OK))


def traced(operation_name: str | None = None) -> Callable:
    """Run the decorated function (sync or async) inside a span.

    Args:
        operation_name: Span name; defaults to "<module>.<function>".
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(func.__module__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _operation_span(tracer, span_name, kwargs):
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _operation_span(tracer, span_name, kwargs):
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span if it is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)


def get_trace_id() -> str | None:
    """Current trace id as 32 hex chars, or None outside a valid span."""
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return None
    return format(ctx.trace_id, "032x")
