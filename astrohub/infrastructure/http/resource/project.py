from astrohub.domain.catalog.model.entity import Project
from astrohub.domain.catalog.model.payload import ProjectFields, ProjectPatch
from astrohub.infrastructure.http.codec import encode_json
from astrohub.infrastructure.http.path import build_path
from astrohub.infrastructure.http.resource.base import ORG, PROJECT, Resource


class ProjectResource(Resource):
    """Projects, scoped under an organization."""

    async def create(self, organization: str, key: str, fields: ProjectFields) -> Project:
        return await self._transport.request(
            "POST",
            build_path((ORG, organization), (PROJECT, key)),
            Project,
            json=encode_json(fields),
        )

    async def get(self, organization: str, key: str) -> Project:
        return await self._transport.request(
            "GET", build_path((ORG, organization), (PROJECT, key)), Project
        )

    async def list(self, organization: str) -> list[Project]:
        return await self._transport.request(
            "GET", build_path((ORG, organization), "projects"), list[Project]
        )

    async def update(self, organization: str, key: str, patch: ProjectPatch) -> Project:
        return await self._transport.request(
            "PATCH",
            build_path((ORG, organization), (PROJECT, key)),
            Project,
            json=encode_json(patch),
        )

    async def delete(self, organization: str, key: str) -> None:
        await self._transport.request(
            "DELETE", build_path((ORG, organization), (PROJECT, key)), None
        )
