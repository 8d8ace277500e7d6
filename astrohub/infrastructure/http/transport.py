"""Single round-trip HTTP transport over a shared httpx.AsyncClient."""

import logging
from typing import Any

import httpx

from astrohub.domain.shared.error import TransportError
from astrohub.infrastructure.http.codec import decode

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class ResourceTransport:
    """Sends one request per call and decodes the response envelope.

    Holds no per-request state, so one instance can be shared by every
    resource group and awaited concurrently.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    def url_for(self, path: str) -> str:
        """Absolute URL for a path, for consumers that fetch it themselves."""
        return f"{self.base_url}{path}"

    async def request(
        self,
        method: str,
        path: str,
        type_: Any,
        *,
        json: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """Perform the call and return the decoded ``data`` (None for 204).

        Multipart uploads leave Content-Type to httpx so it can set the boundary.
        """
        headers = None if files is not None else JSON_HEADERS
        try:
            response = await self._client.request(
                method,
                path,
                json=json,
                files=files,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.debug("%s %s failed: %r", method, path, e)
            detail = str(e) or e.__class__.__name__
            raise TransportError(f"Network error during {method} {path}: {detail}") from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return decode(response, type_)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
