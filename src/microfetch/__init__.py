"""Public surface for the microfetch client."""

from .client import ClientOptions, MicroFetchClient, default_client
from .errors import (
    ConnectionError,
    DecodeError,
    MalformedTargetError,
    MicroFetchError,
    SerializationError,
)
from .request import RequestSpec
from .transport import HttpxTransport, TransportOptions
from .types import ResponseOutcome
from .version import __version__

__all__ = [
    "__version__",
    "ClientOptions",
    "ConnectionError",
    "DecodeError",
    "HttpxTransport",
    "MalformedTargetError",
    "MicroFetchClient",
    "MicroFetchError",
    "RequestSpec",
    "ResponseOutcome",
    "SerializationError",
    "TransportOptions",
    "default_client",
]
