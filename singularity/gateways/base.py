import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import structlog

from ..domain.ports import InvocationResult
from ..infrastructure.logging import bind_invocation

logger = structlog.get_logger()


class Gateway(ABC):
    """Abstract base for Lambda gateways that forward one event per call."""

    @abstractmethod
    async def forward(self, event: dict) -> Any:
        """Forward an inbound event and return the reply for the caller."""
        ...


def stamp_environment(event: dict, env: str | None) -> dict:
    """Set `env` on the event in place; an unset environment removes the key."""
    if env is None:
        event.pop("env", None)
    else:
        event["env"] = env
    return event


def describe_error(result: InvocationResult) -> dict:
    """Build the JSON-safe error description for a failed invocation."""
    error = result.error
    description = {
        "name": type(error).__name__ if error is not None else "Error",
        "message": str(error) if error is not None else "",
    }
    if result.status_code is not None:
        description["status_code"] = result.status_code
    return description


def build_handler(gateway: Gateway) -> Callable[[dict, Any], Any]:
    """
    Wrap a gateway in a Lambda handler.

    Args:
        gateway: Gateway built once at process start

    Returns:
        handler(event, context) for the Lambda runtime
    """

    def handler(event: dict, context) -> Any:
        bind_invocation(context, type(gateway).__name__)
        logger.info("Forwarding event")
        return asyncio.run(gateway.forward(event))

    return handler
