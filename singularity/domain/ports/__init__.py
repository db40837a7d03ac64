from .transport import InvocationResult, Transport, TransportMode

__all__ = [
    "InvocationResult",
    "Transport",
    "TransportMode",
]
