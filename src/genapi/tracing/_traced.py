import inspect
import logging
from functools import wraps
from typing import Any, Callable, Optional

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

logger = logging.getLogger(__name__)

_tracer_instance: Optional[trace.Tracer] = None


def get_tracer() -> trace.Tracer:
    """Lazily initializes and returns the tracer instance."""
    global _tracer_instance
    if _tracer_instance is None:
        logger.debug("Initializing tracer instance.")
        _tracer_instance = trace.get_tracer("genapi")
    return _tracer_instance


def _record_error(span: trace.Span, error: BaseException) -> None:
    span.record_exception(error)
    span.set_status(Status(StatusCode.ERROR, str(error)))


def traced(
    name: Optional[str] = None,
    run_type: Optional[str] = None,
    span_type: Optional[str] = None,
):
    """Wrap a function, sync or async, in an OpenTelemetry span.

    Arguments and return values are never recorded since they may carry
    credentials. Callers add what is safe through `trace.get_current_span()`.
    Exceptions are recorded on the span and re-raised.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        trace_name = name if name is not None else func.__name__

        def _start(default_span_type: str):
            span = get_tracer().start_as_current_span(
                trace_name, record_exception=False, set_status_on_exception=False
            )
            return span, span_type if span_type is not None else default_span_type

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            span_cm, kind = _start("function_call_sync")
            with span_cm as span:
                span.set_attribute("span_type", kind)
                if run_type is not None:
                    span.set_attribute("run_type", run_type)
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    _record_error(span, e)
                    raise

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            span_cm, kind = _start("function_call_async")
            with span_cm as span:
                span.set_attribute("span_type", kind)
                if run_type is not None:
                    span.set_attribute("run_type", run_type)
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    _record_error(span, e)
                    raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
