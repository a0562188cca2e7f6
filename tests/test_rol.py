# ==============================================================================
# ROL ENDPOINT TESTS
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestRolLifecycle:
    """Create, read and delete a role over HTTP."""

    @pytest.mark.asyncio
    async def test_create_get_delete(self, client: AsyncClient):
        response = await client.post(
            "/api/Rol",
            json={"Role": "Admin", "Description": "x"},
        )
        assert response.status_code == 201
        created = response.json()
        assert created["id"] > 0
        assert response.headers["Location"] == f"/api/Rol/{created['id']}"

        response = await client.get(f"/api/Rol/{created['id']}")
        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "Admin"
        assert data["description"] == "x"
        assert data["isDeleted"] is False

        response = await client.delete(f"/api/Rol/{created['id']}")
        assert response.status_code == 200
        assert "message" in response.json()

        response = await client.get(f"/api/Rol/{created['id']}")
        assert response.status_code == 404
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_update_with_id_in_body(self, client: AsyncClient, create_entity):
        rol = await create_entity("Rol", {"role": "Admin"})

        response = await client.put(
            "/api/Rol",
            json={"id": rol["id"], "role": "Owner", "description": "changed"},
        )

        assert response.status_code == 200
        assert response.json()["role"] == "Owner"
        assert response.json()["description"] == "changed"

    @pytest.mark.asyncio
    async def test_update_with_path_id(self, client: AsyncClient, create_entity):
        rol = await create_entity("Rol", {"role": "Admin"})

        response = await client.put(f"/api/Rol/{rol['id']}", json={"role": "Owner"})

        assert response.status_code == 200
        assert response.json()["id"] == rol["id"]

    @pytest.mark.asyncio
    async def test_update_missing_id_is_404(self, client: AsyncClient):
        response = await client.put("/api/Rol", json={"id": 4242, "role": "Ghost"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_blank_role_is_400(self, client: AsyncClient):
        response = await client.post("/api/Rol", json={"role": "   "})

        assert response.status_code == 400
        assert "role" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_malformed_body_is_400(self, client: AsyncClient):
        response = await client.post(
            "/api/Rol",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_id(self, client: AsyncClient, create_entity):
        first = await create_entity("Rol", {"role": "A"})
        second = await create_entity("Rol", {"role": "B"})

        response = await client.get("/api/Rol")

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [first["id"], second["id"]]
