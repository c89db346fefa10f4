"""streamdiff: turn a stream of whole-state snapshots into Add/Remove events.

Typical use::

    from streamdiff import diff_snapshots

    for action in diff_snapshots([["a"], ["a", "b"], ["b"]]):
        print(action)  # Add('a'), Add('b'), Remove('a')
"""

from streamdiff.diff import (
    AsyncSnapshotDiff,
    SetDiffer,
    SnapshotDiff,
    adiff_snapshots,
    apply,
    diff_snapshots,
    replay,
)
from streamdiff.models.actions import Action, ActionKind, Add, DiffState, Remove

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionKind",
    "Add",
    "AsyncSnapshotDiff",
    "DiffState",
    "Remove",
    "SetDiffer",
    "SnapshotDiff",
    "__version__",
    "adiff_snapshots",
    "apply",
    "diff_snapshots",
    "replay",
]
