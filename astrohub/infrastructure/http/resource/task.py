from astrohub.domain.catalog.model.entity import Task
from astrohub.domain.catalog.model.payload import MissionRef
from astrohub.infrastructure.http.path import build_path
from astrohub.infrastructure.http.resource.base import Resource, mission_segments


class TaskResource(Resource):
    """Processing tasks of a mission. Read-only."""

    async def list(self, organization: str, project: str, mission: str) -> list[Task]:
        ref = MissionRef(organization=organization, project=project, mission=mission)
        return await self._transport.request(
            "GET", build_path(*mission_segments(ref), "tasks"), list[Task]
        )
