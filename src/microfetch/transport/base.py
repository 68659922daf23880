"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Protocol, runtime_checkable

from ..errors import ConnectionError
from ..selector import TransportVariant

TransportKind = Literal["http"]

_SCHEMES: dict[TransportVariant, str] = {"plain": "http", "encrypted": "https"}


@dataclass(frozen=True)
class TransportOptions:
    variant: TransportVariant
    host: str
    port: int
    path: str
    method: str
    headers: Mapping[str, str]

    @property
    def scheme(self) -> str:
        return _SCHEMES[self.variant]

    @property
    def url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.scheme}://{host}:{self.port}{self.path}"


@runtime_checkable
class ResponseListener(Protocol):
    """Receives the events of a single request/response exchange.

    ``on_chunk`` fires zero or more times in arrival order, then exactly one of
    ``on_complete`` or ``on_error``.
    """

    def on_chunk(self, chunk: bytes) -> None: ...

    def on_complete(self, status: int, headers: Mapping[str, str]) -> None: ...

    def on_error(self, error: ConnectionError) -> None: ...


@runtime_checkable
class Transport(Protocol):
    Kind = TransportKind

    @property
    def kind(self) -> TransportKind: ...

    async def send(
        self,
        options: TransportOptions,
        body: bytes | None,
        listener: ResponseListener,
    ) -> None: ...


__all__ = ["ResponseListener", "Transport", "TransportKind", "TransportOptions"]
