"""Target parsing and transport variant selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from urllib.parse import SplitResult, urlsplit

import httpx

from .errors import MalformedTargetError

TransportVariant = Literal["plain", "encrypted"]

ENCRYPTED_SCHEME = "https"
DEFAULT_PORTS: dict[TransportVariant, int] = {"plain": 80, "encrypted": 443}


@dataclass(frozen=True)
class TransportChoice:
    variant: TransportVariant
    default_port: int


def parse_target(url: str) -> SplitResult:
    if not isinstance(url, str):
        raise MalformedTargetError(f"URL must be a string, got {type(url).__name__}", context=url)
    try:
        target = urlsplit(url)
        # .port validates lazily
        target.port
    except ValueError as exc:
        raise MalformedTargetError(f"Invalid URL {url!r}: {exc}", context=url) from exc

    if not target.scheme:
        raise MalformedTargetError(f"Invalid URL {url!r}: missing scheme", context=url)
    if not target.hostname:
        raise MalformedTargetError(f"Invalid URL {url!r}: missing host", context=url)

    # httpx is stricter than urlsplit about control characters
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise MalformedTargetError(f"Invalid URL {url!r}: {exc}", context=url) from exc
    return target


def select_transport(target: SplitResult) -> TransportChoice:
    """Pick the transport variant for ``target``.

    Only ``https`` selects the encrypted variant. Any other scheme, including
    ones this client knows nothing about, falls back to plain HTTP rather than
    failing.
    """
    variant: TransportVariant = "encrypted" if target.scheme.lower() == ENCRYPTED_SCHEME else "plain"
    return TransportChoice(variant=variant, default_port=DEFAULT_PORTS[variant])


def resolve_port(target: SplitResult, choice: TransportChoice) -> int:
    return target.port if target.port is not None else choice.default_port


__all__ = [
    "DEFAULT_PORTS",
    "TransportChoice",
    "TransportVariant",
    "parse_target",
    "resolve_port",
    "select_transport",
]
