"""Lambda handler for the galvanic gateway."""

from singularity.config import settings
from singularity.gateways import GalvanicGateway, build_handler
from singularity.infrastructure.logging import configure_logging

configure_logging("galvanic", settings.log_level)

# Transport is chosen here, once per process
handler = build_handler(GalvanicGateway.from_settings(settings))
