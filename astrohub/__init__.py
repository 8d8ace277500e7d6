"""AstroHub: typed client and upload orchestrator for observational-astronomy missions."""

from astrohub.application.dashboard import MissionDashboard, Notification
from astrohub.client import AstroHubClient
from astrohub.config import Config
from astrohub.domain.catalog.model.entity import (
    Asset,
    Mission,
    MissionMetadata,
    Organization,
    Project,
    Task,
)
from astrohub.domain.catalog.model.payload import (
    CreateMissionPayload,
    MissionMetadataPatch,
    MissionPatch,
    MissionRef,
    OrganizationFields,
    OrganizationPatch,
    ProjectFields,
    ProjectPatch,
    UploadFile,
)
from astrohub.domain.upload.model.state import UploadPhase, UploadState
from astrohub.domain.upload.service.orchestrator import UploadResult

__all__ = [
    "Asset",
    "AstroHubClient",
    "Config",
    "CreateMissionPayload",
    "Mission",
    "MissionDashboard",
    "MissionMetadata",
    "MissionMetadataPatch",
    "MissionPatch",
    "MissionRef",
    "Notification",
    "Organization",
    "OrganizationFields",
    "OrganizationPatch",
    "Project",
    "ProjectFields",
    "ProjectPatch",
    "Task",
    "UploadFile",
    "UploadPhase",
    "UploadResult",
    "UploadState",
]
