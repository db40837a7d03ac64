import json
from typing import Any

from ..biome import GateRole
from ..config import Settings
from ..domain.ports import Transport
from ..infrastructure.adapters import TransportFactory
from .base import Gateway, stamp_environment


class CathodeGateway(Gateway):
    """Stamps the environment on each event and forwards it to the jumpgate."""

    def __init__(self, transport: Transport, env: str | None) -> None:
        self._transport = transport
        self._env = env

    @classmethod
    def from_settings(cls, settings: Settings) -> "CathodeGateway":
        # Always remote, whatever the environment
        return cls(TransportFactory.remote(settings, GateRole.JUMPGATE), settings.env)

    @property
    def transport(self) -> Transport:
        return self._transport

    async def forward(self, event: dict) -> Any:
        """Forward the stamped event and return the decoded reply."""
        stamp_environment(event, self._env)
        result = await self._transport.invoke(event)
        result.raise_for_error()
        return json.loads(result.payload)
