"""HTTP tests for the /Regions endpoints."""

import uuid

import pytest


class TestRegionsApi:

    @pytest.mark.asyncio
    async def test_get_all_regions_sorted_by_name(self, test_client):
        response = await test_client.get("/Regions")

        assert response.status_code == 200
        names = [region["name"] for region in response.json()]
        assert names == sorted(names)
        assert "Wellington" in names

    @pytest.mark.asyncio
    async def test_get_region(self, test_client, region):
        response = await test_client.get(f"/Regions/{region.id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": str(region.id),
            "code": "WGN",
            "name": "Wellington",
            "regionImageUrl": None,
        }

    @pytest.mark.asyncio
    async def test_get_unknown_region_is_404(self, test_client):
        response = await test_client.get(f"/Regions/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"detail": "Region not found"}

    @pytest.mark.asyncio
    async def test_add_update_delete_region(self, test_client, writer_headers):
        created = await test_client.post(
            "/Regions",
            json={"Code": "OTG", "Name": "Otago", "RegionImageUrl": "https://img.example/otago.jpg"},
            headers=writer_headers,
        )
        assert created.status_code == 201
        region_id = created.json()["id"]
        assert created.headers["location"].endswith(f"/Regions/{region_id}")

        updated = await test_client.put(
            f"/Regions/{region_id}",
            json={"code": "OTA", "name": "Otago Central"},
            headers=writer_headers,
        )
        assert updated.status_code == 200
        assert updated.json() == {
            "id": region_id,
            "code": "OTA",
            "name": "Otago Central",
            "regionImageUrl": None,
        }

        deleted = await test_client.delete(f"/Regions/{region_id}", headers=writer_headers)
        assert deleted.status_code == 200
        assert deleted.json()["code"] == "OTA"
        assert (await test_client.get(f"/Regions/{region_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_add_region_requires_code_and_name(self, test_client, writer_headers):
        response = await test_client.post("/Regions", json={"Code": ""}, headers=writer_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "Code": ["Code is required."],
            "Name": ["Name is required."],
        }

    @pytest.mark.asyncio
    async def test_update_unknown_region_is_404(self, test_client, writer_headers):
        response = await test_client.put(
            f"/Regions/{uuid.uuid4()}",
            json={"Code": "XXX", "Name": "Nowhere"},
            headers=writer_headers,
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_region_is_404(self, test_client, writer_headers):
        response = await test_client.delete(f"/Regions/{uuid.uuid4()}", headers=writer_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_mutations_require_writer(self, test_client, reader_headers):
        response = await test_client.post(
            "/Regions", json={"Code": "OTG", "Name": "Otago"}, headers=reader_headers
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_malformed_id_is_400(self, test_client):
        response = await test_client.get("/Regions/not-a-uuid")

        assert response.status_code == 400
        assert "RegionId" in response.json()["errors"]
