"""Helpers for consumers that mirror the adapter's set from its actions."""

from __future__ import annotations

from collections.abc import Iterable, MutableSet

from streamdiff.models.actions import Action, ActionKind, T


def apply(state: MutableSet[T], action: Action[T]) -> None:
    """Apply one action to *state* in place.

    Removing an element that is not present is a no-op.
    """
    if action.kind is ActionKind.ADD:
        state.add(action.element)
    else:
        state.discard(action.element)


def replay(actions: Iterable[Action[T]], initial: Iterable[T] = ()) -> set[T]:
    """Fold *actions* over *initial* and return the resulting set."""
    state: set[T] = set(initial)
    for action in actions:
        apply(state, action)
    return state
