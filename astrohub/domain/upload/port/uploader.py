from abc import abstractmethod
from typing import Protocol

from astrohub.domain.catalog.model.entity import Asset
from astrohub.domain.catalog.model.payload import UploadFile


class AssetUploader(Protocol):
    @abstractmethod
    async def upload(
        self, organization: str, project: str, mission: str, file: UploadFile
    ) -> Asset:
        """Upload one file to a mission and return the Asset created by the backend."""
        ...
