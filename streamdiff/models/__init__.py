"""Core data structures for streamdiff."""

from streamdiff.models.actions import Action, ActionKind, Add, DiffState, Remove
from streamdiff.models.config import DemoConfig, LogConfig, StreamDiffConfig

__all__ = [
    "Action",
    "ActionKind",
    "Add",
    "DemoConfig",
    "DiffState",
    "LogConfig",
    "Remove",
    "StreamDiffConfig",
]
