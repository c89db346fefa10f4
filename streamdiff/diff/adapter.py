"""Snapshot-to-change-event adapters.

SnapshotDiff       -- wraps an iterable of snapshots, yields Actions.
AsyncSnapshotDiff  -- wraps an async iterable of snapshots, yields Actions.
diff_snapshots     -- convenience constructor for SnapshotDiff.
adiff_snapshots    -- convenience constructor for AsyncSnapshotDiff.

Both adapters pull at most one snapshot ahead of what they have already
turned into queued actions.  A pending batch is drained synchronously; the
only point where ``__anext__`` may suspend is while awaiting the source.

A fault raised by the source propagates unchanged and leaves the adapter
exhausted: the source is never pulled again after it faulted or ended.
Elements must hash and compare consistently; otherwise the diff is undefined.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from types import TracebackType
from typing import Any, Generic

import structlog

from streamdiff.diff.engine import SetDiffer
from streamdiff.models.actions import Action, DiffState, T

_log = structlog.get_logger(component="diff.adapter")


class _DiffAdapterBase(Generic[T]):
    """State shared by the sync and async adapters."""

    def __init__(self) -> None:
        self._differ: SetDiffer[T] = SetDiffer()
        self._exhausted = False
        # Number of snapshots pulled from the source so far.
        self._seq = 0

    @property
    def state(self) -> DiffState:
        if self._differ.pending:
            return DiffState.DRAINING
        if self._exhausted:
            return DiffState.EXHAUSTED
        return DiffState.AWAITING_SOURCE

    @property
    def previous(self) -> frozenset[T]:
        """Element set the consumer holds after draining the current batch."""
        return self._differ.previous

    @property
    def snapshots_seen(self) -> int:
        return self._seq

    def _ingest(self, snapshot: Iterable[T]) -> None:
        self._seq += 1
        removed, added = self._differ.update(snapshot)
        _log.debug(
            "snapshot_diffed",
            seq=self._seq,
            removed=removed,
            added=added,
            size=len(self._differ),
        )

    def _finish(self) -> None:
        if not self._exhausted:
            self._exhausted = True
            _log.debug("source_exhausted", snapshots=self._seq)

    def _fail(self, exc: Exception) -> None:
        self._exhausted = True
        _log.debug(
            "source_failed",
            seq=self._seq,
            error_type=type(exc).__name__,
            error=str(exc),
        )

    def _abandon(self) -> None:
        dropped = self._differ.discard()
        if dropped:
            _log.debug("pending_actions_discarded", dropped=dropped)
        self._exhausted = True


class SnapshotDiff(_DiffAdapterBase[T]):
    """Iterator of Actions derived from an iterable of snapshots."""

    def __init__(self, source: Iterable[Iterable[T]]) -> None:
        super().__init__()
        self._source: Iterator[Iterable[T]] = iter(source)

    def __iter__(self) -> SnapshotDiff[T]:
        return self

    def __next__(self) -> Action[T]:
        while True:
            action = self._differ.next_action()
            if action is not None:
                return action
            if self._exhausted:
                raise StopIteration
            try:
                snapshot = next(self._source)
            except StopIteration:
                self._finish()
                raise StopIteration from None
            except Exception as exc:
                self._fail(exc)
                raise
            try:
                self._ingest(snapshot)
            except Exception as exc:
                self._fail(exc)
                raise

    def close(self) -> None:
        """Discard undelivered actions and close the source if it supports it."""
        self._abandon()
        close_fn = getattr(self._source, "close", None)
        if close_fn is not None:
            close_fn()

    def __enter__(self) -> SnapshotDiff[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SnapshotDiff(state={self.state.value}, snapshots_seen={self._seq})"


class AsyncSnapshotDiff(_DiffAdapterBase[T]):
    """Async iterator of Actions derived from an async iterable of snapshots.

    Cancelling the consumer while it awaits the source leaves the adapter in
    ``AWAITING_SOURCE`` with no action lost; nothing had been queued yet.
    """

    def __init__(self, source: AsyncIterable[Iterable[T]]) -> None:
        super().__init__()
        self._source: AsyncIterator[Iterable[T]] = aiter(source)

    def __aiter__(self) -> AsyncSnapshotDiff[T]:
        return self

    async def __anext__(self) -> Action[T]:
        while True:
            action = self._differ.next_action()
            if action is not None:
                return action
            if self._exhausted:
                raise StopAsyncIteration
            try:
                snapshot = await anext(self._source)
            except StopAsyncIteration:
                self._finish()
                raise StopAsyncIteration from None
            except Exception as exc:
                self._fail(exc)
                raise
            try:
                self._ingest(snapshot)
            except Exception as exc:
                self._fail(exc)
                raise

    async def aclose(self) -> None:
        """Discard undelivered actions and close the source if it supports it."""
        self._abandon()
        aclose_fn: Any = getattr(self._source, "aclose", None)
        if aclose_fn is not None:
            await aclose_fn()

    async def __aenter__(self) -> AsyncSnapshotDiff[T]:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"AsyncSnapshotDiff(state={self.state.value}, snapshots_seen={self._seq})"


def diff_snapshots(source: Iterable[Iterable[T]]) -> SnapshotDiff[T]:
    """Wrap a snapshot iterable in a :class:`SnapshotDiff`."""
    return SnapshotDiff(source)


def adiff_snapshots(source: AsyncIterable[Iterable[T]]) -> AsyncSnapshotDiff[T]:
    """Wrap an async snapshot iterable in an :class:`AsyncSnapshotDiff`."""
    return AsyncSnapshotDiff(source)
