# ==============================================================================
# ASSIGNMENT ENDPOINT TESTS
# ==============================================================================
# RolUser, ModuleForm and RolFormPermission over HTTP
# ==============================================================================

import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def parents(create_entity) -> dict:
    """One live row of every parent entity."""
    return {
        "rol": await create_entity("Rol", {"role": "Admin"}),
        "user": await create_entity("User", {"userName": "ana"}),
        "form": await create_entity("Form", {"name": "Users"}),
        "module": await create_entity("Module", {"name": "Security"}),
        "permission": await create_entity("Permission", {"name": "Read"}),
    }


class TestRolUser:

    @pytest.mark.asyncio
    async def test_create_decorates_names(self, client: AsyncClient, parents):
        response = await client.post(
            "/api/RolUser",
            json={"RolId": parents["rol"]["id"], "UserId": parents["user"]["id"]},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["rolName"] == "Admin"
        assert data["userName"] == "ana"

    @pytest.mark.asyncio
    async def test_missing_parent_is_400(self, client: AsyncClient, parents):
        response = await client.post(
            "/api/RolUser",
            json={"rolId": 9999, "userId": parents["user"]["id"]},
        )

        assert response.status_code == 400
        assert "9999" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_duplicate_pair_is_400(self, client: AsyncClient, parents):
        payload = {"rolId": parents["rol"]["id"], "userId": parents["user"]["id"]}
        assert (await client.post("/api/RolUser", json=payload)).status_code == 201

        response = await client.post("/api/RolUser", json=payload)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_parent_hard_delete_cascades(self, client: AsyncClient, parents):
        created = (
            await client.post(
                "/api/RolUser",
                json={"rolId": parents["rol"]["id"], "userId": parents["user"]["id"]},
            )
        ).json()

        await client.delete(f"/api/Rol/{parents['rol']['id']}")

        response = await client.get(f"/api/RolUser/{created['id']}")
        assert response.status_code == 404


class TestModuleForm:

    @pytest.mark.asyncio
    async def test_create_and_list(self, client: AsyncClient, parents):
        response = await client.post(
            "/api/ModuleForm",
            json={"formId": parents["form"]["id"], "moduleId": parents["module"]["id"]},
        )
        assert response.status_code == 201

        listed = (await client.get("/api/ModuleForm")).json()
        assert [(m["formName"], m["moduleName"]) for m in listed] == [("Users", "Security")]

    @pytest.mark.asyncio
    async def test_soft_deleted_form_is_rejected(self, client: AsyncClient, parents):
        await client.delete(f"/api/Form/logico/{parents['form']['id']}")

        response = await client.post(
            "/api/ModuleForm",
            json={"formId": parents["form"]["id"], "moduleId": parents["module"]["id"]},
        )
        assert response.status_code == 400


class TestRolFormPermission:

    @pytest.mark.asyncio
    async def test_grant_lifecycle(self, client: AsyncClient, parents):
        response = await client.post(
            "/api/RolFormPermission",
            json={
                "rolId": parents["rol"]["id"],
                "formId": parents["form"]["id"],
                "permissionId": parents["permission"]["id"],
            },
        )
        assert response.status_code == 201
        grant = response.json()
        assert grant["permissionName"] == "Read"
        assert "isDeleted" not in grant

        response = await client.put(
            f"/api/RolFormPermission/{grant['id']}",
            json={
                "rolId": parents["rol"]["id"],
                "formId": parents["form"]["id"],
                "permissionId": 9999,
            },
        )
        assert response.status_code == 400

        response = await client.delete(f"/api/RolFormPermission/{grant['id']}")
        assert response.status_code == 200
        assert (await client.get(f"/api/RolFormPermission/{grant['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_non_positive_parent_is_400(self, client: AsyncClient, parents):
        response = await client.post(
            "/api/RolFormPermission",
            json={"rolId": 0, "formId": parents["form"]["id"], "permissionId": 1},
        )
        assert response.status_code == 400
