"""streamdiff command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``streamdiff`` script).
"""

from streamdiff.cli.main import cli

__all__ = ["cli"]
