from astrohub.domain.catalog.model.entity import Organization
from astrohub.domain.catalog.model.payload import OrganizationFields, OrganizationPatch
from astrohub.infrastructure.http.codec import encode_json
from astrohub.infrastructure.http.path import build_path
from astrohub.infrastructure.http.resource.base import ORG, Resource


class OrganizationResource(Resource):
    async def create(self, key: str, fields: OrganizationFields) -> Organization:
        return await self._transport.request(
            "POST", build_path((ORG, key)), Organization, json=encode_json(fields)
        )

    async def get(self, key: str) -> Organization:
        return await self._transport.request("GET", build_path((ORG, key)), Organization)

    async def list(self) -> list[Organization]:
        return await self._transport.request("GET", build_path("orgs"), list[Organization])

    async def update(self, key: str, patch: OrganizationPatch) -> Organization:
        return await self._transport.request(
            "PATCH", build_path((ORG, key)), Organization, json=encode_json(patch)
        )

    async def delete(self, key: str) -> None:
        await self._transport.request("DELETE", build_path((ORG, key)), None)
