"""Configuration loading from environment variables."""

from __future__ import annotations

import math
import os

from streamdiff.models.config import DemoConfig, LogConfig, StreamDiffConfig

_VALID_LOG_LEVELS = {"debug", "info", "warning", "error"}
_VALID_LOG_FORMATS = {"json", "console"}


class ConfigError(ValueError):
    """Raised when a STREAMDIFF_* variable holds an unusable value."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(f"STREAMDIFF_{key}={value!r}: {reason}")
        self.key = key
        self.value = value


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"STREAMDIFF_{key}", default)


def _env_float(key: str, default: float, min_val: float | None = None, max_val: float | None = None) -> float:
    raw = _env(key, str(default))
    try:
        val = float(raw)
    except ValueError as exc:
        raise ConfigError(key, raw, "not a number") from exc
    if not math.isfinite(val):
        raise ConfigError(key, raw, "not a finite number")
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _env_choice(key: str, default: str, valid: set[str]) -> str:
    value = _env(key, default).lower()
    if value not in valid:
        raise ConfigError(key, value, f"must be one of {sorted(valid)}")
    return value


def load_config() -> StreamDiffConfig:
    """Load configuration from STREAMDIFF_* environment variables."""
    return StreamDiffConfig(
        log=LogConfig(
            level=_env_choice("LOG_LEVEL", "info", _VALID_LOG_LEVELS),
            format=_env_choice("LOG_FORMAT", "json", _VALID_LOG_FORMATS),
        ),
        demo=DemoConfig(
            interval_seconds=_env_float("DEMO_INTERVAL", 0.5, min_val=0.0, max_val=60.0),
        ),
    )
