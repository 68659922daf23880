"""Call-scoped request construction."""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import SplitResult

import httpx

from .errors import SerializationError
from .selector import parse_target, resolve_port, select_transport
from .transport.base import TransportOptions
from .types import HTTP_METHODS, HttpMethod


def serialize_body(value: Any) -> bytes | None:
    """Encode a caller-supplied body as compact, strict JSON.

    ``None`` means "send no body". Every other value is serialized, including
    falsy ones such as ``0`` or ``""``.
    """
    if value is None:
        return None
    try:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Request body is not JSON serializable: {exc}", context=value) from exc
    return text.encode("utf-8")


def check_headers(headers: Mapping[str, str]) -> None:
    """Ensure every header name and value can be written to the wire."""
    try:
        httpx.Headers(dict(headers))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Request headers cannot be encoded: {exc}", context=dict(headers)) from exc


@dataclass(frozen=True)
class RequestSpec:
    """Everything one outgoing request needs. Never shared between calls."""

    target: SplitResult
    method: HttpMethod
    headers: Mapping[str, str]
    body: bytes | None = None

    @classmethod
    def create(
        cls,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> "RequestSpec":
        normalized = method.upper()
        if normalized not in HTTP_METHODS:
            raise ValueError(f"Unsupported method: {method}")
        target = parse_target(url)
        copied = dict(headers or {})
        check_headers(copied)
        payload = serialize_body(body)
        return cls(
            target=target,
            method=normalized,  # type: ignore[arg-type]
            headers=MappingProxyType(copied),
            body=payload,
        )


def build_transport_options(spec: RequestSpec) -> TransportOptions:
    target = spec.target
    choice = select_transport(target)
    path = target.path or "/"
    if target.query:
        path = f"{path}?{target.query}"
    assert target.hostname is not None
    return TransportOptions(
        variant=choice.variant,
        host=target.hostname,
        port=resolve_port(target, choice),
        path=path,
        method=spec.method,
        headers=spec.headers,
    )


__all__ = ["RequestSpec", "build_transport_options", "check_headers", "serialize_body"]
