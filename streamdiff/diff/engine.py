"""Set-difference engine shared by the sync and async diff adapters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Generic

from streamdiff.models.actions import Action, Add, Remove, T


class SetDiffer(Generic[T]):
    """Owns the previously communicated element set and the pending batch.

    ``update`` turns one snapshot into a batch of actions: every ``Remove``
    is queued before every ``Add``.  Order inside each half follows set
    iteration order and is not part of the contract.
    """

    def __init__(self) -> None:
        self._previous: set[T] = set()
        self._queue: deque[Action[T]] = deque()

    @property
    def previous(self) -> frozenset[T]:
        """The deduplicated set the consumer holds once the queue is drained."""
        return frozenset(self._previous)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._previous)

    def next_action(self) -> Action[T] | None:
        """Pop the front of the pending batch, or return None when it is empty."""
        if self._queue:
            return self._queue.popleft()
        return None

    def update(self, snapshot: Iterable[T]) -> tuple[int, int]:
        """Diff *snapshot* against the previous set and queue the resulting batch.

        Returns ``(removed, added)`` counts.  A set-identical snapshot queues
        nothing and returns ``(0, 0)``.
        """
        current = set(snapshot)
        removed = self._previous - current
        added = current - self._previous
        self._queue.extend(Remove(element) for element in removed)
        self._queue.extend(Add(element) for element in added)
        self._previous = current
        return len(removed), len(added)

    def discard(self) -> int:
        """Drop any undelivered actions and return how many were dropped."""
        dropped = len(self._queue)
        self._queue.clear()
        return dropped
