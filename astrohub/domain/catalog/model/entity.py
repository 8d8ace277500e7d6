from pydantic import ConfigDict, Field

from astrohub.domain.shared.model.value import ValueObject


class Organization(ValueObject):
    id: str
    key: str  # Slug used in paths
    name: str
    description: str = ""
    metadata: dict[str, str] = {}


class Project(ValueObject):
    id: str
    key: str  # Unique within its organization
    name: str
    description: str = ""
    metadata: dict[str, str] = {}


class MissionMetadata(ValueObject):
    """Observation parameters recorded for a mission."""

    telescope: str
    target: str
    exposure_time: str
    weather_conditions: str
    observer: str
    priority: str
    altitude: str | None = None
    overlap: str | None = None
    sidelap: str | None = None
    ground_resolution: str | None = None


class Mission(ValueObject):
    id: str
    key: str  # Unique within its project
    name: str
    mission: str  # Mission label, not the routing key
    location: str
    date: str
    metadata: MissionMetadata


class Asset(ValueObject):
    """An uploaded observation file. The id is assigned by the backend."""

    id: str
    original_name: str = Field(alias="originalName")
    content_type: str = Field(alias="contentType")
    size: int
    path: str
    uploaded_at: str = Field(alias="uploadedAt")
    presigned_url: str = Field(alias="presignedUrl")
    direct_url: str = Field(alias="directUrl")
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")


class Task(ValueObject):
    """Processing task. Fields beyond ``id`` are defined by the backend and kept as-is."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
