"""Demo harness for streamdiff.

Replays the configured snapshots through a timed async source, diffs them
with AsyncSnapshotDiff and logs every resulting action.  Startup order:
config → logging → source → adapter.  SIGINT/SIGTERM cancel the run; the
adapter is closed on the way out so its source is released.
"""

from __future__ import annotations

import asyncio
import signal
from typing import TYPE_CHECKING

from streamdiff.config import ConfigError, load_config
from streamdiff.diff import adiff_snapshots
from streamdiff.models.actions import Action
from streamdiff.models.config import StreamDiffConfig
from streamdiff.observability.logging import get_logger, setup_logging
from streamdiff.sources import timed_snapshots

if TYPE_CHECKING:
    import structlog


class DemoApp:
    """Owns the demo configuration and drives one adapter to exhaustion."""

    def __init__(self, config: StreamDiffConfig) -> None:
        self.config = config
        self.delivered: list[Action[str]] = []
        self._log: structlog.stdlib.BoundLogger = get_logger("app")

    async def run(self) -> list[Action[str]]:
        """Diff every configured snapshot and return the delivered actions."""
        demo = self.config.demo
        self._log.info(
            "demo starting",
            snapshots=len(demo.snapshots),
            interval=demo.interval_seconds,
        )
        source = timed_snapshots(demo.snapshots, interval=demo.interval_seconds)
        async with adiff_snapshots(source) as actions:
            async for action in actions:
                self.delivered.append(action)
                self._log.info("action", kind=action.kind.value, element=action.element)
            self._log.info(
                "demo finished",
                actions=len(self.delivered),
                final_set=sorted(actions.previous),
            )
        return self.delivered


def _streamdiff_version() -> str:
    from streamdiff import __version__

    return __version__


# ---------------------------------------------------------------------------
# Async entrypoint
# ---------------------------------------------------------------------------


async def main(config: StreamDiffConfig | None = None) -> None:
    """Run the demo, stop cleanly on SIGINT/SIGTERM.

    Configuration is read from the environment unless *config* is given.
    """
    if config is None:
        try:
            config = load_config()
        except ConfigError as exc:
            setup_logging()
            get_logger("app").critical("invalid configuration", key=exc.key, error=str(exc))
            raise SystemExit(2) from exc

    setup_logging(config.log.level, config.log.format)
    log = get_logger("app")
    log.info("streamdiff starting", version=_streamdiff_version())

    app = DemoApp(config)
    task = asyncio.create_task(app.run(), name="demo")
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, task.cancel)

    try:
        await task
    except asyncio.CancelledError:
        log.info("demo interrupted", delivered=len(app.delivered))
    finally:
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.remove_signal_handler(sig)
