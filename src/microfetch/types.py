"""Shared typing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from .errors import MicroFetchError

T = TypeVar("T")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]
HTTP_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass(frozen=True)
class ResponseOutcome(Generic[T]):
    """Result of one call: either decoded data or the error that stopped it.

    Build instances through :meth:`success` and :meth:`failure` so that exactly
    one side is populated.
    """

    ok: bool
    data: T | None = None
    error: MicroFetchError | None = None
    status: int | None = None

    @classmethod
    def success(cls, data: T, *, status: int | None = None) -> "ResponseOutcome[T]":
        return cls(ok=True, data=data, status=status)

    @classmethod
    def failure(cls, error: MicroFetchError, *, status: int | None = None) -> "ResponseOutcome[T]":
        return cls(ok=False, error=error, status=status)

    @property
    def error_kind(self) -> str | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the decoded data or raise the carried error."""
        if not self.ok:
            assert self.error is not None
            raise self.error
        return self.data  # type: ignore[return-value]


__all__ = ["HTTP_METHODS", "HttpMethod", "ResponseOutcome"]
