import logging

from astrohub.domain.catalog.model.entity import Asset
from astrohub.domain.catalog.model.payload import MissionRef, UploadFile
from astrohub.infrastructure.http.codec import encode_upload
from astrohub.infrastructure.http.path import build_path
from astrohub.infrastructure.http.resource.base import ASSETS, Resource, mission_segments

logger = logging.getLogger(__name__)


class AssetResource(Resource):
    """Observation files attached to a mission. Created only by upload."""

    async def upload(
        self, organization: str, project: str, mission: str, file: UploadFile
    ) -> Asset:
        ref = MissionRef(organization=organization, project=project, mission=mission)
        path = build_path(*mission_segments(ref), (ASSETS, "upload"))
        logger.debug("Uploading %s (%d bytes) to %s", file.name, file.size, path)
        return await self._transport.request("POST", path, Asset, files=encode_upload(file))

    async def list(self, organization: str, project: str, mission: str) -> list[Asset]:
        ref = MissionRef(organization=organization, project=project, mission=mission)
        return await self._transport.request(
            "GET", build_path(*mission_segments(ref), ASSETS), list[Asset]
        )

    async def get(self, organization: str, project: str, mission: str, asset_id: str) -> Asset:
        ref = MissionRef(organization=organization, project=project, mission=mission)
        return await self._transport.request(
            "GET", build_path(*mission_segments(ref), (ASSETS, asset_id)), Asset
        )

    def thumbnail_url(self, organization: str, project: str, mission: str, asset_id: str) -> str:
        """Browser-loadable thumbnail URL. No request is made."""
        ref = MissionRef(organization=organization, project=project, mission=mission)
        path = build_path(*mission_segments(ref), (ASSETS, asset_id), "thumbnail")
        return self._transport.url_for(path)
