"""Client entry point wiring every resource group onto one HTTP connection pool."""

from types import TracebackType
from typing import Self

import httpx

from astrohub.config import ApiConfig
from astrohub.domain.upload.service.orchestrator import UploadOrchestrator
from astrohub.infrastructure.http.resource.asset import AssetResource
from astrohub.infrastructure.http.resource.mission import MissionResource
from astrohub.infrastructure.http.resource.organization import OrganizationResource
from astrohub.infrastructure.http.resource.project import ProjectResource
from astrohub.infrastructure.http.resource.task import TaskResource
from astrohub.infrastructure.http.transport import ResourceTransport


class AstroHubClient:
    """Typed client for the organization/project/mission/asset/task backend.

    Stateless apart from the connection pool; share one instance across
    callers. Use ``from_config`` at startup, and close it (or use it as an
    async context manager) when done.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._transport = ResourceTransport(http)
        self.organizations = OrganizationResource(self._transport)
        self.projects = ProjectResource(self._transport)
        self.missions = MissionResource(self._transport)
        self.assets = AssetResource(self._transport)
        self.tasks = TaskResource(self._transport)
        self.uploads = UploadOrchestrator(uploader=self.assets)

    @classmethod
    def from_config(
        cls,
        config: ApiConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Self:
        """Build a client for ``config.base_url``.

        Args:
            config: API section of the process configuration.
            transport: Alternative httpx transport (e.g. ``httpx.MockTransport``).
        """
        http = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout),
            transport=transport,
        )
        return cls(http)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
