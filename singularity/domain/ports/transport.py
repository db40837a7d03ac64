"""
Outbound port for forwarding gateway events.

Gateways depend on this interface; the HTTP and Lambda adapters implement it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class TransportMode(str, Enum):
    """Wire path used to forward an event."""

    LOCAL = "local"
    REMOTE = "remote"


@dataclass
class InvocationResult:
    """Outcome of forwarding one event."""

    success: bool
    payload: bytes | None = None
    error: Exception | None = None
    status_code: int | None = None
    function_error: str | None = None

    def raise_for_error(self) -> "InvocationResult":
        """Re-raise the captured exception, if any."""
        if self.error is not None:
            raise self.error
        return self


class Transport(ABC):
    """
    Outbound port for forwarding an event to the next hop.

    Implementations never raise for transport failures; the failure is
    captured in the returned InvocationResult and the caller decides.
    """

    @property
    @abstractmethod
    def mode(self) -> TransportMode:
        """Return the wire path this transport uses."""
        ...

    @abstractmethod
    async def invoke(self, event: dict) -> InvocationResult:
        """
        Forward an event and wait for the reply.

        Args:
            event: JSON-serializable event record

        Returns:
            InvocationResult with the raw reply payload or the error
        """
        ...
