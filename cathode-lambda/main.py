"""Lambda handler for the cathode gateway."""

from singularity.config import settings
from singularity.gateways import CathodeGateway, build_handler
from singularity.infrastructure.logging import configure_logging

configure_logging("cathode", settings.log_level)

handler = build_handler(CathodeGateway.from_settings(settings))
