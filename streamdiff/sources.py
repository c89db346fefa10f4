"""Async snapshot sources for feeding an AsyncSnapshotDiff.

timed_snapshots -- replay a fixed list of snapshots, one per interval.
poll_snapshots  -- repeatedly call a "fetch whole state" function.

Neither source reads ahead: the next snapshot is produced only when the
consumer asks for it.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from typing import TypeVar

import structlog

_log = structlog.get_logger(component="sources")

T = TypeVar("T")

FetchFn = Callable[[], Iterable[T] | Awaitable[Iterable[T]]]


async def timed_snapshots(
    snapshots: Iterable[Iterable[T]],
    interval: float = 0.0,
) -> AsyncIterator[list[T]]:
    """Yield each snapshot in turn, sleeping *interval* seconds before each one.

    Each snapshot is materialised into a list so later mutation of the
    caller's containers does not leak into an already-yielded snapshot.
    """
    for snapshot in snapshots:
        if interval > 0:
            await asyncio.sleep(interval)
        yield list(snapshot)


async def poll_snapshots(
    fetch: FetchFn[T],
    interval: float,
    limit: int | None = None,
) -> AsyncIterator[list[T]]:
    """Poll *fetch* every *interval* seconds and yield what it returns.

    *fetch* may be a plain function or a coroutine function.  The first call
    happens immediately; later calls are spaced by *interval*.  When *limit*
    is set the source ends after that many snapshots.  Exceptions raised by
    *fetch* end the source and propagate to the consumer.
    """
    if interval < 0:
        raise ValueError(f"interval must be non-negative, got {interval}")
    polls = 0
    while limit is None or polls < limit:
        if polls and interval > 0:
            await asyncio.sleep(interval)
        result = fetch()
        if inspect.isawaitable(result):
            result = await result
        polls += 1
        snapshot = list(result)
        _log.debug("snapshot_polled", poll=polls, size=len(snapshot))
        yield snapshot
