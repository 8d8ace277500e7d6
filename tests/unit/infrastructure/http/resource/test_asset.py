"""Tests for asset and task operations against the in-memory backend."""

import pytest

from astrohub.domain.catalog.model.entity import Asset, Task
from astrohub.domain.catalog.model.payload import OrganizationFields, ProjectFields, UploadFile
from astrohub.domain.shared.error import HttpStatusError, NotFoundError


@pytest.fixture
async def mission(client, mission_payload):
    await client.organizations.create("o1", OrganizationFields(key="o1", name="Org"))
    await client.projects.create("o1", "p1", ProjectFields(key="p1", name="Project"))
    return await client.missions.create(mission_payload)


class TestAssetResource:
    async def test_upload_sends_single_file_part(self, client, backend, mission):
        file = UploadFile(name="m31.png", content=b"\x89PNG\r\n\x1a\nfake")

        asset = await client.assets.upload("o1", "p1", "m1", file)

        request = backend.requests[-1]
        assert request.method == "POST"
        assert request.url.path == "/org/o1/project/p1/mission/m1/assets/upload"
        assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
        assert isinstance(asset, Asset)
        assert asset.original_name == "m31.png"
        assert asset.content_type == "image/png"
        assert asset.size == len(file.content)

    async def test_asset_id_comes_from_backend(self, client, mission):
        asset = await client.assets.upload("o1", "p1", "m1", UploadFile(name="a.fits", content=b"x"))
        assert asset.id.startswith("asset-")

    async def test_list_and_get(self, client, mission):
        first = await client.assets.upload("o1", "p1", "m1", UploadFile(name="a.fits", content=b"a"))
        second = await client.assets.upload("o1", "p1", "m1", UploadFile(name="b.fits", content=b"bb"))

        assets = await client.assets.list("o1", "p1", "m1")
        fetched = await client.assets.get("o1", "p1", "m1", second.id)

        assert assets == [first, second]
        assert fetched == second

    async def test_get_missing_asset(self, client, mission):
        with pytest.raises(NotFoundError, match="Asset not found"):
            await client.assets.get("o1", "p1", "m1", "asset-999")

    async def test_upload_failure_message(self, client, backend, mission):
        backend.failing_uploads.add("bad.fits")

        with pytest.raises(HttpStatusError, match="Storage rejected bad.fits") as exc_info:
            await client.assets.upload("o1", "p1", "m1", UploadFile(name="bad.fits", content=b"x"))
        assert exc_info.value.status_code == 500

    async def test_thumbnail_url_makes_no_request(self, client, backend):
        url = client.assets.thumbnail_url("o1", "p1", "m1", "asset-7")

        assert url == "http://astrohub.test/org/o1/project/p1/mission/m1/assets/asset-7/thumbnail"
        assert backend.requests == []

    def test_asset_accepts_wire_and_python_names(self):
        wire = Asset.model_validate(
            {
                "id": "a1",
                "originalName": "x.fits",
                "contentType": "application/fits",
                "size": 1,
                "path": "p",
                "uploadedAt": "t",
                "presignedUrl": "u",
                "directUrl": "d",
                "thumbnailUrl": "th",
            }
        )
        assert wire.thumbnail_url == "th"
        assert wire.model_dump(by_alias=True)["originalName"] == "x.fits"


class TestTaskResource:
    async def test_list_preserves_backend_fields(self, client, backend):
        backend.tasks[("o1", "p1", "m1")] = [
            {"id": "t1", "type": "stacking", "status": "running", "progress": 0.4},
            {"id": "t2", "type": "astrometry", "status": "queued"},
        ]

        tasks = await client.tasks.list("o1", "p1", "m1")

        assert backend.requests[-1].url.path == "/org/o1/project/p1/mission/m1/tasks"
        assert all(isinstance(t, Task) for t in tasks)
        assert [t.id for t in tasks] == ["t1", "t2"]
        assert tasks[0].model_dump() == {
            "id": "t1",
            "type": "stacking",
            "status": "running",
            "progress": 0.4,
        }

    async def test_list_empty(self, client):
        assert await client.tasks.list("o1", "p1", "m1") == []
