"""Shared fixtures for streamdiff integration tests.

Provides async snapshot sources with observable pull counts so tests can
check exactly when the adapter suspends on, or pulls from, its source.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Any

import pytest


class QueueSource:
    """Async iterator whose snapshots are pushed by the test.

    ``__anext__`` blocks until a snapshot (or ``None`` for end of stream, or
    an exception instance to raise) is queued.  Cancellation while blocked
    leaves the source usable, unlike an async generator.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self.pulls = 0
        self.closed = False

    def push(self, item: Iterable[Any] | BaseException | None) -> None:
        self._queue.put_nowait(item)

    def __aiter__(self) -> QueueSource:
        return self

    async def __anext__(self) -> Iterable[Any]:
        self.pulls += 1
        item = await self._queue.get()
        if item is None:
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            raise item
        return item

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def queue_source() -> QueueSource:
    return QueueSource()
