"""
Factory for creating gateway transports.

The wire path is decided here, once, from the settings a process starts with.
"""

import structlog

from ...biome import GateRole, target_function_name
from ...config import Settings
from ...domain.ports import Transport
from .http_transport import HttpTransport
from .lambda_transport import LambdaTransport

logger = structlog.get_logger()


class TransportFactory:
    """Creates the transport a gateway forwards through."""

    @classmethod
    def create(cls, settings: Settings, role: GateRole) -> Transport:
        """
        Pick the local HTTP transport in local mode, the Lambda transport otherwise.

        Args:
            settings: Settings captured at process start
            role: Gate role used to name the remote target

        Returns:
            Transport implementation for this process
        """
        if settings.local_mode:
            logger.info("Using local HTTP transport", url=settings.local_gateway_url)
            return HttpTransport(settings.local_gateway_url)
        return cls.remote(settings, role)

    @classmethod
    def remote(cls, settings: Settings, role: GateRole) -> LambdaTransport:
        """Create a Lambda transport targeting `<biome>-<role>`."""
        function_name = target_function_name(settings.env, role)
        logger.info("Using Lambda transport", function_name=function_name, env=settings.env)
        return LambdaTransport(
            function_name=function_name,
            region=settings.aws_region,
            endpoint_url=settings.aws_endpoint_url,
        )
