"""Shared fixtures for the streamdiff test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

# Reference scenario: four pulls from a dessert-menu source.
SWEETS: list[list[str]] = [
    ["Chocolate"],
    ["Chocolate", "Bonbon"],
    ["Chocolate", "Bonbon", "Cookie"],
    ["Cake", "Bonbon", "Cookie"],
]


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any setup_logging() call so tests never share logger config."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sweets() -> list[list[str]]:
    return [list(snapshot) for snapshot in SWEETS]
