"""Change-event data structures and adapter state enumeration."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class ActionKind(StrEnum):
    """Variant tag of an Action."""

    ADD = "add"
    REMOVE = "remove"


class DiffState(StrEnum):
    """Lifecycle state of a diff adapter."""

    AWAITING_SOURCE = "awaiting_source"
    DRAINING = "draining"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Action(Generic[T]):
    """One reported change: *element* was added to or removed from the set.

    Immutable and hashable, so batches can be compared as sets in tests.
    """

    kind: ActionKind
    element: T

    @property
    def is_add(self) -> bool:
        return self.kind is ActionKind.ADD

    @property
    def is_remove(self) -> bool:
        return self.kind is ActionKind.REMOVE

    def __repr__(self) -> str:
        return f"{self.kind.value.capitalize()}({self.element!r})"


def Add(element: T) -> Action[T]:  # noqa: N802
    """Build an ``Add(element)`` action."""
    return Action(ActionKind.ADD, element)


def Remove(element: T) -> Action[T]:  # noqa: N802
    """Build a ``Remove(element)`` action."""
    return Action(ActionKind.REMOVE, element)
