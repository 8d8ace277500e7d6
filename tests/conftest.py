"""Global test fixtures.

``FakeBackend`` implements the REST surface in memory behind an
``httpx.MockTransport`` so the real client, codec and transport run end to end.
"""

import itertools
import json
import re
from collections.abc import AsyncGenerator
from typing import Any
from urllib.parse import unquote

import httpx
import logfire
import pytest

from astrohub.client import AstroHubClient
from astrohub.config import ApiConfig
from astrohub.domain.catalog.model.entity import MissionMetadata
from astrohub.domain.catalog.model.payload import CreateMissionPayload, MissionRef, UploadFile

logfire.configure(send_to_logfire=False, console=False)

BASE_URL = "http://astrohub.test"

Key = tuple[str, ...]


def _json(status: int, body: Any) -> httpx.Response:
    return httpx.Response(status, json=body)


def _not_found(what: str) -> httpx.Response:
    return _json(404, {"error": f"{what} not found"})


def _parse_upload(request: httpx.Request) -> tuple[str, str, bytes, str | None]:
    """Return (field name, filename, content, content type) of the single multipart part."""
    boundary = request.headers["content-type"].split("boundary=", 1)[1].encode()
    part = request.content.split(b"--" + boundary)[1]
    head, _, data = part.partition(b"\r\n\r\n")
    field = re.search(rb'name="([^"]*)"', head)
    filename = re.search(rb'filename="([^"]*)"', head)
    content_type = re.search(rb"Content-Type: ([^\r\n]+)", head)
    return (
        field.group(1).decode() if field else "",
        filename.group(1).decode() if filename else "",
        data.removesuffix(b"\r\n"),
        content_type.group(1).decode() if content_type else None,
    )


class FakeBackend:
    """In-memory backend speaking the ``{data}`` / ``{error}`` envelope."""

    def __init__(self) -> None:
        self.orgs: dict[Key, dict[str, Any]] = {}
        self.projects: dict[Key, dict[str, Any]] = {}
        self.missions: dict[Key, dict[str, Any]] = {}
        self.assets: dict[Key, list[dict[str, Any]]] = {}
        self.tasks: dict[Key, list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []
        self.failing_uploads: set[str] = set()
        self._ids = itertools.count(1)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def bodies(self, method: str) -> list[dict[str, Any]]:
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == method and r.headers.get("content-type") == "application/json"
        ]

    def upload_attempts(self) -> list[str]:
        return [_parse_upload(r)[1] for r in self.requests if r.url.path.endswith("/assets/upload")]

    def _new_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raw = request.url.raw_path.decode().split("?", 1)[0]
        parts = [unquote(p) for p in raw.split("/") if p]
        method = request.method

        match parts:
            case ["orgs"] if method == "GET":
                return _json(200, {"data": list(self.orgs.values())})
            case ["org", org]:
                return self._entity(request, self.orgs, (org,), "Organization", "org")
            case ["org", org, "projects"] if method == "GET":
                return _json(200, {"data": [v for k, v in self.projects.items() if k[0] == org]})
            case ["org", org, "project", project]:
                return self._entity(request, self.projects, (org, project), "Project", "proj")
            case ["org", org, "project", project, "missions"] if method == "GET":
                found = [v for k, v in self.missions.items() if k[:2] == (org, project)]
                return _json(200, {"data": found})
            case ["org", org, "project", project, "mission", mission]:
                return self._entity(
                    request,
                    self.missions,
                    (org, project, mission),
                    "Mission",
                    "mission",
                    defaults={"mission": mission},
                )
            case ["org", org, "project", project, "mission", mission, "assets"] if method == "GET":
                return _json(200, {"data": self.assets.get((org, project, mission), [])})
            case ["org", org, "project", project, "mission", mission, "assets", "upload"] if (
                method == "POST"
            ):
                return self._upload(request, (org, project, mission))
            case ["org", org, "project", project, "mission", mission, "assets", asset_id] if (
                method == "GET"
            ):
                for asset in self.assets.get((org, project, mission), []):
                    if asset["id"] == asset_id:
                        return _json(200, {"data": asset})
                return _not_found("Asset")
            case ["org", org, "project", project, "mission", mission, "tasks"] if method == "GET":
                return _json(200, {"data": self.tasks.get((org, project, mission), [])})
        return _json(404, {"error": f"No route for {method} {raw}"})

    def _entity(
        self,
        request: httpx.Request,
        store: dict[Key, dict[str, Any]],
        key: Key,
        kind: str,
        prefix: str,
        defaults: dict[str, Any] | None = None,
    ) -> httpx.Response:
        match request.method:
            case "POST":
                if key in store:
                    return _json(409, {"error": f"{kind} '{key[-1]}' already exists"})
                record = {
                    "id": self._new_id(prefix),
                    "key": key[-1],
                    **(defaults or {}),
                    **json.loads(request.content),
                }
                store[key] = record
                return _json(201, {"data": record})
            case "GET":
                if key not in store:
                    return _not_found(kind)
                return _json(200, {"data": store[key]})
            case "PATCH":
                if key not in store:
                    return _not_found(kind)
                changes = json.loads(request.content)
                record = dict(store[key])
                # Partial nested metadata merges key by key in this fake
                if isinstance(changes.get("metadata"), dict):
                    changes["metadata"] = {**record.get("metadata", {}), **changes["metadata"]}
                record.update(changes)
                store[key] = record
                return _json(200, {"data": record})
            case "DELETE":
                if store.pop(key, None) is None:
                    return _not_found(kind)
                return httpx.Response(204)
        return _json(405, {"error": f"Method {request.method} not allowed"})

    def _upload(self, request: httpx.Request, mission: Key) -> httpx.Response:
        if mission not in self.missions:
            return _not_found("Mission")
        field, filename, content, content_type = _parse_upload(request)
        if field != "file":
            return _json(400, {"error": "Missing file field"})
        if filename in self.failing_uploads:
            return _json(500, {"error": f"Storage rejected {filename}"})
        asset_id = self._new_id("asset")
        path = "/".join((*mission, filename))
        asset = {
            "id": asset_id,
            "originalName": filename,
            "contentType": content_type or "application/octet-stream",
            "size": len(content),
            "path": path,
            "uploadedAt": "2026-10-18T12:00:00Z",
            "presignedUrl": f"https://storage.test/{path}?sig=abc",
            "directUrl": f"https://storage.test/{path}",
        }
        self.assets.setdefault(mission, []).append(asset)
        return _json(201, {"data": asset})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
async def client(backend: FakeBackend) -> AsyncGenerator[AstroHubClient, None]:
    client = AstroHubClient.from_config(ApiConfig(base_url=BASE_URL), transport=backend.transport)
    yield client
    await client.close()


@pytest.fixture
def mission_metadata() -> MissionMetadata:
    return MissionMetadata(
        telescope="VLT-UT1",
        target="NGC 1300",
        exposure_time="300s",
        weather_conditions="clear",
        observer="R. Vega",
        priority="high",
    )


@pytest.fixture
def mission_payload(mission_metadata: MissionMetadata) -> CreateMissionPayload:
    return CreateMissionPayload(
        organization="o1",
        project="p1",
        mission="m1",
        name="N",
        location="L",
        date="D",
        metadata=mission_metadata,
    )


@pytest.fixture
def mission_ref() -> MissionRef:
    return MissionRef(organization="o1", project="p1", mission="m1")


@pytest.fixture
def files() -> list[UploadFile]:
    return [
        UploadFile(name="frame-001.fits", content=b"SIMPLE  =   T" * 10),
        UploadFile(name="frame-002.fits", content=b"SIMPLE  =   T" * 20),
        UploadFile(name="frame-003.fits", content=b"SIMPLE  =   T" * 30),
    ]
