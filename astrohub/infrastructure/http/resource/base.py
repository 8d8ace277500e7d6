from astrohub.domain.catalog.model.payload import MissionRef
from astrohub.infrastructure.http.path import Segment
from astrohub.infrastructure.http.transport import ResourceTransport

ORG = "org"
PROJECT = "project"
MISSION = "mission"
ASSETS = "assets"


class Resource:
    """Operation group for one entity kind, sharing a stateless transport."""

    def __init__(self, transport: ResourceTransport) -> None:
        self._transport = transport


def mission_segments(ref: MissionRef) -> tuple[Segment, ...]:
    return (
        (ORG, ref.organization),
        (PROJECT, ref.project),
        (MISSION, ref.mission),
    )
