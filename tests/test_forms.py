# ==============================================================================
# FORM ENDPOINT TESTS
# ==============================================================================
# CRUD over the raw SQL repository and provider switching
# ==============================================================================

import pytest
from httpx import AsyncClient

from access_admin.core.settings import DatabaseProvider
from access_admin.database.factory import DatabaseFactory


class TestFormCrud:

    @pytest.mark.asyncio
    async def test_create_sets_server_fields(self, client: AsyncClient, sample_form_data):
        response = await client.post("/api/Form", json=sample_form_data)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == sample_form_data["name"]
        assert data["status"] is True
        assert data["dateCreated"] is not None
        assert response.headers["Location"] == f"/api/Form/{data['id']}"

    @pytest.mark.asyncio
    async def test_update_keeps_creation_date(self, client: AsyncClient, create_entity):
        form = await create_entity("Form", {"name": "Users"})
        original = (await client.get(f"/api/Form/{form['id']}")).json()["dateCreated"]

        response = await client.put(
            f"/api/Form/{form['id']}",
            json={"name": "Accounts", "status": False, "dateCreated": "2000-01-01T00:00:00"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Accounts"
        assert data["status"] is False
        assert data["dateCreated"] == original

    @pytest.mark.asyncio
    async def test_blank_name_is_400(self, client: AsyncClient):
        response = await client.post("/api/Form", json={"Name": ""})
        assert response.status_code == 400


class TestFormProvider:

    @pytest.mark.asyncio
    async def test_default_provider(self, client: AsyncClient):
        response = await client.get("/api/Form/Provider")

        assert response.status_code == 200
        assert response.json() == {"provider": "sqlite"}

    @pytest.mark.asyncio
    async def test_set_provider(self, client: AsyncClient):
        response = await client.post("/api/Form/SetProvider", json="mysql")

        assert response.status_code == 200
        assert response.json()["provider"] == "mysql"
        assert "message" in response.json()

        response = await client.get("/api/Form/Provider")
        assert response.json()["provider"] == "mysql"

    @pytest.mark.asyncio
    async def test_switch_does_not_touch_connections(self, client: AsyncClient):
        await client.post("/api/Form/SetProvider", json="sqlserver")

        # Adapters are created lazily by the first Form request
        assert not DatabaseFactory.is_initialized(DatabaseProvider.SQLSERVER)
        assert DatabaseFactory.get_adapter(DatabaseProvider.SQLITE).is_connected

    @pytest.mark.asyncio
    async def test_unknown_provider_is_400(self, client: AsyncClient):
        response = await client.post("/api/Form/SetProvider", json="oracle")

        assert response.status_code == 400
        assert "oracle" in response.json()["message"]

        response = await client.get("/api/Form/Provider")
        assert response.json()["provider"] == "sqlite"

    @pytest.mark.asyncio
    async def test_switch_back_serves_existing_rows(self, client: AsyncClient, create_entity):
        form = await create_entity("Form", {"name": "Users"})

        await client.post("/api/Form/SetProvider", json="postgresql")
        await client.post("/api/Form/SetProvider", json="SQLite")

        response = await client.get(f"/api/Form/{form['id']}")
        assert response.status_code == 200
