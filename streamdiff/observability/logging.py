"""Structured logging configuration using structlog.

Library modules only ever call :func:`get_logger`; the process entry point
(``python -m streamdiff``) or the embedding application decides the level and
renderer by calling :func:`setup_logging` once.
"""

from __future__ import annotations

import logging
import sys

import structlog

_VALID_FORMATS = ("json", "console")


def setup_logging(level: str = "info", fmt: str = "json") -> None:
    """Configure structlog output to stderr.

    ``fmt="json"`` emits one JSON object per line; ``fmt="console"`` uses the
    coloured key/value renderer, which is easier to follow when running the
    demo interactively.
    """
    if fmt not in _VALID_FORMATS:
        raise ValueError(f"Invalid log format: {fmt}. Must be one of {_VALID_FORMATS}")
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer: structlog.types.Processor
    if fmt == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
