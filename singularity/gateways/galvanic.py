"""
Galvanic gateway.

Forwards to the local development gateway when ENV is "NONE" and to the
environment's warpgate otherwise. The transport is picked once when the
gateway is built, so the choice holds for the life of the process.
"""

import json

import structlog

from ..biome import GateRole
from ..config import Settings
from ..domain.ports import Transport, TransportMode
from ..infrastructure.adapters import TransportFactory
from .base import Gateway, describe_error, stamp_environment

logger = structlog.get_logger()


def _stringify(value) -> str:
    """Compact JSON text, as the local gateway's JavaScript callers expect."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class GalvanicGateway(Gateway):
    """Forwards events to the warpgate, or to a local gateway in development."""

    def __init__(self, transport: Transport, env: str | None) -> None:
        self._transport = transport
        self._env = env

    @classmethod
    def from_settings(cls, settings: Settings) -> "GalvanicGateway":
        return cls(TransportFactory.create(settings, GateRole.WARPGATE), settings.env)

    @property
    def transport(self) -> Transport:
        return self._transport

    async def forward(self, event: dict) -> str:
        if self._transport.mode is TransportMode.LOCAL:
            return await self._forward_local(event)
        return await self._forward_remote(event)

    async def _forward_local(self, event: dict) -> str:
        """
        Send the raw event to the local gateway.

        Never raises: failures come back as a JSON string of the form
        {"error": {...}} so the caller always gets a successful reply.
        """
        result = await self._transport.invoke(event)
        if not result.success:
            logger.warning("Returning error envelope for local gateway failure")
            return _stringify({"error": describe_error(result)})

        try:
            data = json.loads(result.payload)
        except ValueError:
            # Non-JSON bodies are passed back as a JSON string
            data = (result.payload or b"").decode("utf-8", errors="replace")
        return _stringify(data)

    async def _forward_remote(self, event: dict) -> str:
        """Send the stamped event to the warpgate and return its payload undecoded."""
        stamp_environment(event, self._env)
        result = await self._transport.invoke(event)
        result.raise_for_error()
        return result.payload.decode("utf-8")
