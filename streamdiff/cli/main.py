"""Click commands for streamdiff.

streamdiff demo   -- run the timed sweets demo through AsyncSnapshotDiff.
streamdiff lines  -- diff JSON-array snapshots read one per line.
"""

from __future__ import annotations

import asyncio
import json
import math
from collections.abc import Iterator
from typing import IO, Any

import click

from streamdiff.app import main as run_demo
from streamdiff.config import ConfigError, load_config
from streamdiff.diff import diff_snapshots
from streamdiff.observability.logging import setup_logging


def _parse_snapshots(stream: IO[str]) -> Iterator[list[Any]]:
    """Yield one snapshot per non-blank line of *stream*.

    Each line must be a JSON array of scalars (strings, numbers, booleans or
    null); nested arrays and objects are not hashable and are rejected, and so
    are NaN and infinite numbers, which have no valid JSON output form.
    """
    for lineno, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            snapshot = json.loads(line)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"line {lineno}: invalid JSON ({exc.msg})") from exc
        if not isinstance(snapshot, list):
            raise click.ClickException(f"line {lineno}: expected a JSON array")
        for element in snapshot:
            if isinstance(element, (list, dict)):
                raise click.ClickException(f"line {lineno}: elements must be JSON scalars")
            if isinstance(element, float) and not math.isfinite(element):
                raise click.ClickException(f"line {lineno}: elements must be finite numbers")
        yield snapshot


@click.group()
@click.version_option(package_name="streamdiff")
def cli() -> None:
    """Turn whole-state snapshots into Add/Remove change events."""


@cli.command()
@click.option("--interval", type=click.FloatRange(min=0.0, max=60.0), default=None, help="Seconds between snapshots.")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Override STREAMDIFF_LOG_LEVEL.",
)
def demo(interval: float | None, log_level: str | None) -> None:
    """Replay the reference snapshots and log each change event."""
    try:
        config = load_config()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    if interval is not None:
        config.demo.interval_seconds = interval
    if log_level is not None:
        config.log.level = log_level
    asyncio.run(run_demo(config))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--log-level", type=click.Choice(["debug", "info", "warning", "error"]), default="warning")
def lines(source: IO[str], log_level: str) -> None:
    """Diff snapshots read from SOURCE (default stdin), one JSON array per line.

    Each change is printed as a JSON object, e.g. {"action": "add", "element": "x"}.
    """
    setup_logging(log_level)
    for action in diff_snapshots(_parse_snapshots(source)):
        click.echo(json.dumps({"action": action.kind.value, "element": action.element}))
