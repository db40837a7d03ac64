from .http_transport import HttpTransport
from .lambda_transport import LambdaTransport
from .transport_factory import TransportFactory

__all__ = [
    "HttpTransport",
    "LambdaTransport",
    "TransportFactory",
]
