from astrohub.domain.catalog.model.entity import Mission
from astrohub.domain.catalog.model.payload import CreateMissionPayload, MissionPatch, MissionRef
from astrohub.infrastructure.http.codec import encode_json
from astrohub.infrastructure.http.path import build_path
from astrohub.infrastructure.http.resource.base import ORG, PROJECT, Resource, mission_segments


class MissionResource(Resource):
    async def create(self, payload: CreateMissionPayload) -> Mission:
        # Routing keys address the mission; encode_json drops them from the body
        return await self._transport.request(
            "POST",
            build_path(*mission_segments(payload.ref)),
            Mission,
            json=encode_json(payload),
        )

    async def get(self, organization: str, project: str, mission: str) -> Mission:
        ref = MissionRef(organization=organization, project=project, mission=mission)
        return await self._transport.request("GET", build_path(*mission_segments(ref)), Mission)

    async def list(self, organization: str, project: str) -> list[Mission]:
        return await self._transport.request(
            "GET",
            build_path((ORG, organization), (PROJECT, project), "missions"),
            list[Mission],
        )

    async def update(
        self, organization: str, project: str, mission: str, patch: MissionPatch
    ) -> Mission:
        ref = MissionRef(organization=organization, project=project, mission=mission)
        return await self._transport.request(
            "PATCH",
            build_path(*mission_segments(ref)),
            Mission,
            json=encode_json(patch),
        )
