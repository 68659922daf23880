"""HTTP/HTTPS transport built on top of httpx."""

from __future__ import annotations

import ssl

import httpx

from ..errors import ConnectionError
from ..logger import BoundLogger, create_logger
from .base import ResponseListener, Transport, TransportOptions


class HttpxTransport:
    """Runs one request per call on a dedicated ``httpx.AsyncClient``.

    A new client is opened for every ``send`` and closed before the terminal
    event fires, so no connection outlives its call.
    """

    kind: Transport.Kind = "http"

    def __init__(
        self,
        *,
        timeout: float | None = None,
        verify: bool | ssl.SSLContext = True,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._timeout = timeout
        self._verify = verify
        self._transport = transport
        self._logger = (logger or create_logger()).child("http")

    async def send(
        self,
        options: TransportOptions,
        body: bytes | None,
        listener: ResponseListener,
    ) -> None:
        url = options.url
        self._logger.debug("%s %s bytes=%d", options.method, url, len(body or b""))
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                verify=self._verify,
                follow_redirects=False,
                trust_env=False,
                transport=self._transport,
            ) as client:
                async with client.stream(
                    options.method,
                    url,
                    headers=dict(options.headers),
                    content=body,
                ) as response:
                    async for chunk in response.aiter_bytes():
                        self._logger.trace("%s <- chunk bytes=%d", url, len(chunk))
                        listener.on_chunk(chunk)
                    status = response.status_code
                    headers = {k.lower(): v for k, v in response.headers.items()}
        except httpx.TimeoutException as exc:
            self._logger.debug("%s timed out: %r", url, exc)
            listener.on_error(ConnectionError(f"HTTP request timeout after {self._timeout}s", context=url))
            return
        except httpx.HTTPError as exc:
            listener.on_error(ConnectionError(f"Cannot complete request to {url}: {exc}", context=url))
            return

        self._logger.debug("HTTP <- %s status=%s", url, status)
        listener.on_complete(status, headers)


__all__ = ["HttpxTransport"]
