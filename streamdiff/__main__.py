"""Entry point for `python -m streamdiff`.

Usage:
    python -m streamdiff
    STREAMDIFF_LOG_FORMAT=console STREAMDIFF_DEMO_INTERVAL=1 python -m streamdiff
"""

from __future__ import annotations

import asyncio

from streamdiff.app import main

asyncio.run(main())
