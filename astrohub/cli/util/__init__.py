"""CLI utilities (client lifecycle, option parsing)."""

from astrohub.cli.util.client import make_client, parse_metadata, run

__all__ = [
    "make_client",
    "parse_metadata",
    "run",
]
