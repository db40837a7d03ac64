from .base import Gateway, build_handler, describe_error, stamp_environment
from .cathode import CathodeGateway
from .galvanic import GalvanicGateway

__all__ = [
    "CathodeGateway",
    "GalvanicGateway",
    "Gateway",
    "build_handler",
    "describe_error",
    "stamp_environment",
]
