"""Structured logging for the gateways and the service-worker build."""

import logging
import sys
import time

import structlog


def configure_logging(component: str, level: str = "INFO") -> None:
    """
    Route structlog through stdlib logging as one JSON line per event.

    Args:
        component: Gateway or tool name stamped on every line
        level: Standard logging level name
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _stamp_component(component),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _stamp_component(component: str):
    def processor(logger, method_name, event_dict):
        event_dict.setdefault("component", component)
        return event_dict

    return processor


def bind_invocation(context, gateway: str) -> None:
    """
    Scope log context to one Lambda invocation.

    Clears whatever the previous invocation bound, then binds the gateway
    name and the runtime's request ID when the context carries one.
    """
    structlog.contextvars.clear_contextvars()
    fields = {"gateway": gateway}
    aws_request_id = getattr(context, "aws_request_id", None)
    if aws_request_id:
        fields["request_id"] = aws_request_id
    structlog.contextvars.bind_contextvars(**fields)


class Timer:
    """Wall-clock timer for an outbound call, read as `duration_ms` after the block."""

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        return round((self._end - self._start) * 1000, 2)
