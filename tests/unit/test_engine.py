"""Unit tests for SetDiffer and the replay helpers."""

from __future__ import annotations

from typing import Any

from streamdiff.diff.engine import SetDiffer
from streamdiff.diff.replay import apply, replay
from streamdiff.models.actions import Action, ActionKind, Add, Remove


def _drain(differ: SetDiffer[Any]) -> list[Action[Any]]:
    out: list[Action[Any]] = []
    while (action := differ.next_action()) is not None:
        out.append(action)
    return out


# ---------------------------------------------------------------------------
# Action model
# ---------------------------------------------------------------------------


class TestAction:
    def test_constructors_set_kind(self) -> None:
        assert Add("x").kind == ActionKind.ADD
        assert Remove("x").kind == ActionKind.REMOVE
        assert Add("x").is_add and not Add("x").is_remove
        assert Remove("x").is_remove and not Remove("x").is_add

    def test_value_equality_and_hash(self) -> None:
        assert Add(1) == Add(1)
        assert Add(1) != Remove(1)
        assert len({Add(1), Add(1), Remove(1)}) == 2

    def test_repr_reads_like_the_variant(self) -> None:
        assert repr(Add("Cake")) == "Add('Cake')"
        assert repr(Remove(3)) == "Remove(3)"

    def test_kind_serialises_as_plain_string(self) -> None:
        assert ActionKind.ADD == "add"
        assert str(ActionKind.REMOVE) == "remove"


# ---------------------------------------------------------------------------
# SetDiffer
# ---------------------------------------------------------------------------


class TestSetDiffer:
    def test_starts_empty(self) -> None:
        differ: SetDiffer[str] = SetDiffer()
        assert differ.pending == 0
        assert differ.previous == frozenset()
        assert len(differ) == 0
        assert differ.next_action() is None

    def test_first_update_adds_everything(self) -> None:
        differ: SetDiffer[str] = SetDiffer()
        assert differ.update(["a", "b"]) == (0, 2)
        assert set(_drain(differ)) == {Add("a"), Add("b")}
        assert differ.previous == frozenset({"a", "b"})

    def test_removes_are_queued_before_adds(self) -> None:
        differ: SetDiffer[str] = SetDiffer()
        differ.update(["a", "b", "c"])
        _drain(differ)

        assert differ.update(["c", "d", "e"]) == (2, 2)
        batch = _drain(differ)
        assert [a.kind for a in batch] == [ActionKind.REMOVE] * 2 + [ActionKind.ADD] * 2
        assert set(batch[:2]) == {Remove("a"), Remove("b")}
        assert set(batch[2:]) == {Add("d"), Add("e")}

    def test_identical_snapshot_queues_nothing(self) -> None:
        differ: SetDiffer[int] = SetDiffer()
        differ.update([1, 2])
        _drain(differ)
        assert differ.update([2, 1, 1]) == (0, 0)
        assert differ.pending == 0

    def test_duplicates_collapse(self) -> None:
        differ: SetDiffer[str] = SetDiffer()
        differ.update(["A", "A", "B"])
        assert sorted(_drain(differ), key=repr) == [Add("A"), Add("B")]
        assert len(differ) == 2

    def test_empty_snapshot_removes_everything(self) -> None:
        differ: SetDiffer[str] = SetDiffer()
        differ.update(["a", "b"])
        _drain(differ)
        assert differ.update([]) == (2, 0)
        assert set(_drain(differ)) == {Remove("a"), Remove("b")}
        assert differ.previous == frozenset()

    def test_discard_drops_pending_but_keeps_previous(self) -> None:
        differ: SetDiffer[str] = SetDiffer()
        differ.update(["a", "b", "c"])
        differ.next_action()
        assert differ.discard() == 2
        assert differ.pending == 0
        assert differ.previous == frozenset({"a", "b", "c"})

    def test_previous_is_a_snapshot_copy(self) -> None:
        differ: SetDiffer[str] = SetDiffer()
        differ.update(["a"])
        seen = differ.previous
        differ.update(["b"])
        assert seen == frozenset({"a"})


# ---------------------------------------------------------------------------
# apply / replay
# ---------------------------------------------------------------------------


class TestReplay:
    def test_apply_add_and_remove(self) -> None:
        state: set[str] = set()
        apply(state, Add("x"))
        apply(state, Add("y"))
        apply(state, Remove("x"))
        assert state == {"y"}

    def test_remove_of_absent_element_is_noop(self) -> None:
        state = {"a"}
        apply(state, Remove("zzz"))
        assert state == {"a"}

    def test_replay_from_empty(self) -> None:
        actions = [Add("Chocolate"), Add("Bonbon"), Remove("Chocolate"), Add("Cake")]
        assert replay(actions) == {"Bonbon", "Cake"}

    def test_replay_from_initial_does_not_mutate_it(self) -> None:
        initial = frozenset({"a", "b"})
        assert replay([Remove("a"), Add("c")], initial) == {"b", "c"}
        assert initial == frozenset({"a", "b"})

    def test_replay_of_nothing_is_initial(self) -> None:
        assert replay([], ["a"]) == {"a"}
