from unittest.mock import AsyncMock, MagicMock

import pytest

from singularity.config import Settings
from singularity.domain.ports import InvocationResult, TransportMode


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def remote_transport():
    transport = MagicMock()
    transport.mode = TransportMode.REMOTE
    transport.invoke = AsyncMock(
        return_value=InvocationResult(success=True, payload=b'{"status": "ok"}', status_code=200)
    )
    return transport


@pytest.fixture
def local_transport():
    transport = MagicMock()
    transport.mode = TransportMode.LOCAL
    transport.invoke = AsyncMock(
        return_value=InvocationResult(success=True, payload=b'{"status": "ok"}', status_code=200)
    )
    return transport
