"""View state for a single mission: details, assets and batch uploads.

The dashboard never patches its lists from mutation results. After a
write it refetches from the backend.
"""

import logging
from collections.abc import Sequence
from typing import Literal

from astrohub.client import AstroHubClient
from astrohub.domain.catalog.model.entity import Asset, Mission
from astrohub.domain.catalog.model.payload import MissionRef, UploadFile
from astrohub.domain.shared.error import AstroHubError
from astrohub.domain.shared.model.value import ValueObject
from astrohub.domain.upload.model.state import UploadState
from astrohub.domain.upload.service.orchestrator import UploadResult

logger = logging.getLogger(__name__)


class Notification(ValueObject):
    title: str
    message: str
    level: Literal["success", "error"]


class MissionDashboard:
    def __init__(self, client: AstroHubClient, ref: MissionRef) -> None:
        self._client = client
        self.ref = ref
        self.mission: Mission | None = None
        self.assets: list[Asset] = []
        self.loading = False
        self.uploading = False
        self.upload_progress = 0.0  # Percent, 0-100
        self.notifications: list[Notification] = []

    async def load(self) -> None:
        await self.load_mission()
        await self.load_assets()

    async def load_mission(self) -> None:
        self.loading = True
        try:
            self.mission = await self._client.missions.get(
                self.ref.organization, self.ref.project, self.ref.mission
            )
        except AstroHubError as e:
            logger.warning("Failed to load mission %s: %s", self.ref.mission, e.message)
            self.mission = None
            self._notify_error("Failed to load mission")
        finally:
            self.loading = False

    async def load_assets(self) -> None:
        try:
            self.assets = await self._client.assets.list(
                self.ref.organization, self.ref.project, self.ref.mission
            )
        except AstroHubError as e:
            logger.warning("Failed to load assets for %s: %s", self.ref.mission, e.message)
            self._notify_error("Failed to load assets")

    async def upload(self, files: Sequence[UploadFile]) -> UploadResult | None:
        """Upload a batch, then refetch the asset list.

        Returns None when the batch failed; the failure message is recorded
        as a notification verbatim.
        """
        self.uploading = True
        self.upload_progress = 0.0
        try:
            result = await self._client.uploads.upload_batch(
                self.ref, files, on_progress=self._on_progress
            )
            noun = "asset" if result.count == 1 else "assets"
            self.notifications.append(
                Notification(
                    title="Success",
                    message=f"{result.count} {noun} uploaded successfully",
                    level="success",
                )
            )
            await self.load_assets()
            return result
        except AstroHubError as e:
            self._notify_error(e.message)
            # Files before the failing one stay persisted on the backend
            await self.load_assets()
            return None
        finally:
            self.uploading = False
            self.upload_progress = 0.0

    def thumbnail_url(self, asset: Asset) -> str:
        return self._client.assets.thumbnail_url(
            self.ref.organization, self.ref.project, self.ref.mission, asset.id
        )

    def _on_progress(self, state: UploadState) -> None:
        self.upload_progress = state.percent

    def _notify_error(self, message: str) -> None:
        self.notifications.append(Notification(title="Error", message=message, level="error"))
