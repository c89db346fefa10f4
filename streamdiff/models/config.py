"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

# Reference scenario replayed by the demo harness.
DEFAULT_DEMO_SNAPSHOTS: tuple[tuple[str, ...], ...] = (
    ("Chocolate",),
    ("Chocolate", "Bonbon"),
    ("Chocolate", "Bonbon", "Cookie"),
    ("Cake", "Bonbon", "Cookie"),
)


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class DemoConfig:
    """Demo harness configuration."""

    interval_seconds: float = 0.5
    snapshots: tuple[tuple[str, ...], ...] = DEFAULT_DEMO_SNAPSHOTS


@dataclass
class StreamDiffConfig:
    """Top-level streamdiff configuration."""

    log: LogConfig = field(default_factory=LogConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
