"""Error types carried inside response outcomes."""

from __future__ import annotations

from typing import Any, ClassVar


class MicroFetchError(Exception):
    """Base error for all client failures."""

    kind: ClassVar[str] = "error"

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class MalformedTargetError(MicroFetchError):
    """Raised when the target URL cannot be parsed."""

    kind = "malformed_target"


class SerializationError(MicroFetchError):
    """Raised when a request body cannot be encoded as JSON."""

    kind = "serialization"


class ConnectionError(MicroFetchError):
    """Raised when the transport fails before the response completes."""

    kind = "connection"


class DecodeError(MicroFetchError):
    """Raised when a complete response body is not valid JSON."""

    kind = "decode"

    def __init__(self, message: str, *, raw: bytes, reason: str, context: Any | None = None) -> None:
        super().__init__(message, context=context)
        self.raw = raw
        self.reason = reason


__all__ = [
    "ConnectionError",
    "DecodeError",
    "MalformedTargetError",
    "MicroFetchError",
    "SerializationError",
]
