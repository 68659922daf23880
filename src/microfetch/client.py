"""High-level asynchronous JSON client for plain and encrypted HTTP."""

from __future__ import annotations

import asyncio
import functools
import ssl
from dataclasses import dataclass
from typing import Any, Mapping

from .channel import ResultChannel
from .decoder import ResponseDecoder, Validator
from .errors import ConnectionError, MalformedTargetError, SerializationError
from .logger import LogLevel, create_logger
from .request import RequestSpec, build_transport_options
from .transport import HttpxTransport, Transport
from .types import ResponseOutcome


@dataclass
class ClientOptions:
    transport: Transport | None = None
    timeout: float | None = None
    verify: bool | ssl.SSLContext = True
    default_headers: Mapping[str, str] | None = None
    logger: object | None = None
    log_level: LogLevel = "info"


class MicroFetchClient:
    """Issues JSON requests and returns a :class:`ResponseOutcome` per call.

    The client only holds configuration. Everything about an individual call
    lives in that call's ``RequestSpec`` and decoder, so one instance can
    serve any number of concurrent requests.

    Verb methods never raise for malformed URLs, unserializable bodies,
    connection failures or undecodable responses; those arrive as
    ``outcome.error``.
    """

    def __init__(
        self,
        *,
        transport: Transport | None = None,
        timeout: float | None = None,
        verify: bool | ssl.SSLContext = True,
        default_headers: Mapping[str, str] | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = ClientOptions(
            transport=transport,
            timeout=timeout,
            verify=verify,
            default_headers=default_headers,
            logger=logger,
            log_level=log_level,
        )
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._transport = options.transport or HttpxTransport(
            timeout=options.timeout,
            verify=options.verify,
            logger=self._logger,
        )
        self._default_headers: Mapping[str, str] = dict(options.default_headers or {})

    async def get(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        validate: Validator | None = None,
    ) -> ResponseOutcome[Any]:
        return await self.request("GET", url, headers, body, validate=validate)

    async def post(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        validate: Validator | None = None,
    ) -> ResponseOutcome[Any]:
        return await self.request("POST", url, headers, body, validate=validate)

    async def put(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        validate: Validator | None = None,
    ) -> ResponseOutcome[Any]:
        return await self.request("PUT", url, headers, body, validate=validate)

    async def delete(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        validate: Validator | None = None,
    ) -> ResponseOutcome[Any]:
        return await self.request("DELETE", url, headers, body, validate=validate)

    async def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        validate: Validator | None = None,
    ) -> ResponseOutcome[Any]:
        merged = {**self._default_headers, **(headers or {})}
        try:
            spec = RequestSpec.create(method, url, headers=merged, body=body)
        except (MalformedTargetError, SerializationError) as exc:
            self._logger.warn("Rejected %s %s before sending: %s", method.upper(), url, exc)
            return ResponseOutcome.failure(exc)

        self._logger.debug("Dispatching %s %s", spec.method, url)
        return await self._dispatch(spec, validate)

    async def _dispatch(self, spec: RequestSpec, validate: Validator | None) -> ResponseOutcome[Any]:
        options = build_transport_options(spec)
        channel: ResultChannel[Any] = ResultChannel(logger=self._logger)
        decoder: ResponseDecoder[Any] = ResponseDecoder(channel, validate=validate, logger=self._logger)

        target_url = options.url
        task = asyncio.ensure_future(self._transport.send(options, spec.body, decoder))

        def _on_transport_done(finished: "asyncio.Future[None]") -> None:
            if finished.cancelled() or decoder.finished:
                return
            exc = finished.exception()
            reason = f"Transport failed: {exc!r}" if exc else "Transport finished without a response"
            decoder.on_error(ConnectionError(reason, context=target_url))

        task.add_done_callback(_on_transport_done)
        try:
            return await channel.wait()
        finally:
            if not task.done():
                task.cancel()


@functools.lru_cache(maxsize=None)
def default_client() -> MicroFetchClient:
    """Shared client with default options, created on first use."""
    return MicroFetchClient()


__all__ = ["ClientOptions", "MicroFetchClient", "default_client"]
