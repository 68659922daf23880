"""Transport implementations exposed to users."""

from .base import ResponseListener, Transport, TransportKind, TransportOptions
from .http import HttpxTransport

__all__ = [
    "HttpxTransport",
    "ResponseListener",
    "Transport",
    "TransportKind",
    "TransportOptions",
]
