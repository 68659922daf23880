"""Single-settlement result channel."""

from __future__ import annotations

import asyncio
from typing import Generic

from .logger import BoundLogger, create_logger
from .types import ResponseOutcome, T


class ResultChannel(Generic[T]):
    """Future that resolves to exactly one ResponseOutcome.

    The first ``resolve`` wins; later ones are dropped.
    """

    def __init__(self, *, logger: BoundLogger | None = None) -> None:
        self._future: asyncio.Future[ResponseOutcome[T]] = asyncio.get_running_loop().create_future()
        self._logger = logger or create_logger()

    @property
    def settled(self) -> bool:
        return self._future.done()

    def resolve(self, outcome: ResponseOutcome[T]) -> bool:
        if self._future.done():
            self._logger.trace("Dropping late outcome ok=%s", outcome.ok)
            return False
        self._future.set_result(outcome)
        return True

    async def wait(self) -> ResponseOutcome[T]:
        return await self._future


__all__ = ["ResultChannel"]
