"""Response accumulation and JSON decoding."""

from __future__ import annotations

import json
from typing import Any, Callable, Generic, Mapping

from .channel import ResultChannel
from .errors import ConnectionError, DecodeError
from .logger import BoundLogger, create_logger
from .types import ResponseOutcome, T

Validator = Callable[[Any], Any]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name}")


def decode_payload(raw: bytes) -> Any:
    """Parse ``raw`` as strict JSON.

    The body must be UTF-8 without a byte order mark. Raises DecodeError for
    anything else ``json.loads`` rejects, including an empty body and the
    non-standard NaN/Infinity literals.
    """
    try:
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"Invalid JSON response: {exc}", raw=raw, reason=str(exc)) from exc


class ResponseDecoder(Generic[T]):
    """Collects one response's chunks and settles its result channel."""

    def __init__(
        self,
        channel: ResultChannel[T],
        *,
        validate: Validator | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._channel = channel
        self._validate = validate
        self._buffer = bytearray()
        self._finished = False
        self._logger = (logger or create_logger()).child("decoder")

    @property
    def finished(self) -> bool:
        return self._finished

    def on_chunk(self, chunk: bytes) -> None:
        if self._finished:
            self._logger.trace("Ignoring chunk after terminal event bytes=%d", len(chunk))
            return
        self._buffer.extend(chunk)

    def on_complete(self, status: int, headers: Mapping[str, str]) -> None:
        if not self._begin_terminal("complete"):
            return
        raw = bytes(self._buffer)
        try:
            data = decode_payload(raw)
            if self._validate is not None:
                data = self._apply_validator(data, raw)
        except DecodeError as exc:
            self._logger.warn("Decode failed status=%s bytes=%d: %s", status, len(raw), exc.reason)
            self._channel.resolve(ResponseOutcome.failure(exc, status=status))
            return
        self._logger.debug("Decoded response status=%s bytes=%d", status, len(raw))
        self._channel.resolve(ResponseOutcome.success(data, status=status))

    def on_error(self, error: ConnectionError) -> None:
        if not self._begin_terminal("error"):
            return
        self._logger.warn("%s", error)
        self._channel.resolve(ResponseOutcome.failure(error))

    def _begin_terminal(self, event: str) -> bool:
        if self._finished:
            self._logger.trace("Ignoring %s after terminal event", event)
            return False
        self._finished = True
        return True

    def _apply_validator(self, data: Any, raw: bytes) -> Any:
        assert self._validate is not None
        try:
            return self._validate(data)
        except (TypeError, ValueError) as exc:
            raise DecodeError(f"Response failed validation: {exc}", raw=raw, reason=str(exc)) from exc


__all__ = ["ResponseDecoder", "Validator", "decode_payload"]
