"""Running a single client operation from a CLI command."""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import TypeVar

from astrohub.cli.console import get_console
from astrohub.client import AstroHubClient
from astrohub.config import Config, configure_logging
from astrohub.domain.shared.error import AstroHubError, TransportError

T = TypeVar("T")


def make_client(config: Config) -> AstroHubClient:
    return AstroHubClient.from_config(config.api)


def run(operation: Callable[[AstroHubClient], Awaitable[T]]) -> T:
    """Run ``operation`` against a fresh client, exiting with status 1 on failure."""
    config = Config()
    configure_logging(config.logging)
    console = get_console()

    async def _main() -> T:
        async with make_client(config) as client:
            return await operation(client)

    try:
        return asyncio.run(_main())
    except TransportError as e:
        console.error(
            e.message,
            hint=f"Is the backend running at {config.api.base_url}? "
            "Set ASTROHUB_API__BASE_URL to point elsewhere.",
        )
        sys.exit(1)
    except AstroHubError as e:
        console.error(e.message)
        sys.exit(1)


def parse_metadata(pairs: list[str] | None) -> dict[str, str]:
    """Parse repeated ``key=value`` options into a metadata map."""
    metadata: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            get_console().error(f"Invalid metadata '{pair}'", hint="Expected key=value")
            sys.exit(1)
        metadata[key.strip()] = value
    return metadata
