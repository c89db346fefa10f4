"""Observability helpers for streamdiff (structured logging)."""

from streamdiff.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
