"""Snapshot diffing for streamdiff.

Turns a sequence of whole-state snapshots into Add/Remove change events.

Submodules:
    engine   -- SetDiffer: previous-set bookkeeping and batch computation.
    adapter  -- SnapshotDiff / AsyncSnapshotDiff pull-based adapters.
    replay   -- apply/replay helpers for consumers mirroring the set.
"""

from streamdiff.diff.adapter import AsyncSnapshotDiff, SnapshotDiff, adiff_snapshots, diff_snapshots
from streamdiff.diff.engine import SetDiffer
from streamdiff.diff.replay import apply, replay

__all__ = [
    "AsyncSnapshotDiff",
    "SetDiffer",
    "SnapshotDiff",
    "adiff_snapshots",
    "apply",
    "diff_snapshots",
    "replay",
]
