"""Request payloads for create/update calls."""

import mimetypes
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from astrohub.domain.catalog.model.entity import MissionMetadata
from astrohub.domain.shared.model.value import Patch, ValueObject


class OrganizationFields(ValueObject):
    """Organization fields minus the backend-generated id."""

    key: str
    name: str
    description: str = ""
    metadata: dict[str, str] = {}


class ProjectFields(ValueObject):
    key: str
    name: str
    description: str = ""
    metadata: dict[str, str] = {}


class OrganizationPatch(Patch):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None


class ProjectPatch(Patch):
    key: str | None = None
    name: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None


class MissionMetadataPatch(Patch):
    telescope: str | None = None
    target: str | None = None
    exposure_time: str | None = None
    weather_conditions: str | None = None
    observer: str | None = None
    priority: str | None = None
    altitude: str | None = None
    overlap: str | None = None
    sidelap: str | None = None
    ground_resolution: str | None = None


class MissionPatch(Patch):
    """Partial mission update.

    Whether a partial ``metadata`` replaces or merges into the stored
    metadata is decided by the backend; only the fields set here are sent.
    """

    key: str | None = None
    name: str | None = None
    mission: str | None = None
    location: str | None = None
    date: str | None = None
    metadata: MissionMetadataPatch | None = None


class MissionRef(ValueObject):
    """Routing keys addressing one mission."""

    organization: str
    project: str
    mission: str


class CreateMissionPayload(ValueObject):
    """Mission creation request.

    ``organization``, ``project`` and ``mission`` only route the request;
    they are never serialized into the body.
    """

    ROUTING_KEYS: ClassVar[set[str]] = {"organization", "project", "mission"}

    organization: str
    project: str
    mission: str
    name: str
    location: str
    date: str
    metadata: MissionMetadata

    @property
    def ref(self) -> MissionRef:
        return MissionRef(
            organization=self.organization,
            project=self.project,
            mission=self.mission,
        )

    def to_body(self) -> dict:
        return self.model_dump(mode="json", exclude=self.ROUTING_KEYS, exclude_none=True)


class UploadFile(BaseModel):
    """A file selected for upload."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: bytes
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: Path) -> "UploadFile":
        return cls(name=path.name, content=path.read_bytes())

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def media_type(self) -> str:
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.name)
        return guessed or "application/octet-stream"
