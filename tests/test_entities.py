# ==============================================================================
# SHARED ENTITY ENDPOINT TESTS
# ==============================================================================
# Behavior every entity endpoint must share
# ==============================================================================

import pytest
from httpx import AsyncClient

# Entities without parents, with a valid creation payload
PLAIN_ENTITIES = {
    "Person": {"name": "Ana", "lastName": "Garcia", "phone": "555-0100"},
    "User": {"userName": "ana", "email": "ana@example.com"},
    "Rol": {"role": "Admin", "description": "Full access"},
    "Permission": {"name": "Read", "description": "Read only"},
    "Form": {"name": "Users", "description": "User screen"},
    "Module": {"name": "Security", "description": "Access control", "status": True},
}

ALL_ENTITIES = [
    *PLAIN_ENTITIES,
    "RolUser",
    "ModuleForm",
    "RolFormPermission",
]

# Largest key the drivers accept; one more cannot be bound at all
MAX_ID = 2**63 - 1


async def valid_payload(entity: str, create_entity) -> dict:
    """Build a payload that passes validation, creating parents when needed."""
    if entity in PLAIN_ENTITIES:
        return dict(PLAIN_ENTITIES[entity])

    rol = await create_entity("Rol", {"role": "Admin"})
    if entity == "RolUser":
        user = await create_entity("User", {"userName": "ana"})
        return {"rolId": rol["id"], "userId": user["id"]}

    form = await create_entity("Form", {"name": "Users"})
    if entity == "ModuleForm":
        module = await create_entity("Module", {"name": "Security"})
        return {"formId": form["id"], "moduleId": module["id"]}

    permission = await create_entity("Permission", {"name": "Read"})
    return {"rolId": rol["id"], "formId": form["id"], "permissionId": permission["id"]}


class TestIdValidation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ALL_ENTITIES)
    @pytest.mark.parametrize("bad_id", [0, -1])
    async def test_get_non_positive_id_is_400(self, client: AsyncClient, entity, bad_id):
        response = await client.get(f"/api/{entity}/{bad_id}")

        assert response.status_code == 400
        assert "message" in response.json()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ALL_ENTITIES)
    async def test_get_missing_id_is_404(self, client: AsyncClient, entity):
        response = await client.get(f"/api/{entity}/9999")
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ALL_ENTITIES)
    async def test_id_beyond_64_bits_is_400(self, client: AsyncClient, entity):
        too_large = MAX_ID + 1

        for response in (
            await client.get(f"/api/{entity}/{too_large}"),
            await client.delete(f"/api/{entity}/{too_large}"),
            await client.get(f"/api/{entity}/99999999999999999999"),
        ):
            assert response.status_code == 400
            assert "64-bit" in response.json()["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ALL_ENTITIES)
    async def test_largest_id_is_404(self, client: AsyncClient, entity):
        response = await client.get(f"/api/{entity}/{MAX_ID}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_parent_id_beyond_64_bits_is_400(self, client: AsyncClient, create_entity):
        user = await create_entity("User", {"userName": "ana"})

        response = await client.post(
            "/api/RolUser",
            json={"rolId": MAX_ID + 1, "userId": user["id"]},
        )
        assert response.status_code == 400

        response = await client.post("/api/User", json={"userName": "bo", "personId": MAX_ID + 1})
        assert response.status_code == 400


class TestCreateRoundTrip:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity, payload", PLAIN_ENTITIES.items())
    async def test_created_entity_matches_input(self, client: AsyncClient, entity, payload):
        response = await client.post(f"/api/{entity}", json=payload)
        assert response.status_code == 201
        created_id = response.json()["id"]

        response = await client.get(f"/api/{entity}/{created_id}")
        assert response.status_code == 200
        body = response.json()

        for key, value in payload.items():
            assert body[key] == value
        assert body["isDeleted"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "entity, payload, field",
        [
            ("Form", {"name": "Users"}, "dateCreated"),
            ("User", {"userName": "ana"}, "registrationDate"),
        ],
    )
    async def test_creation_timestamp_is_stored_in_utc(
        self, client: AsyncClient, entity, payload, field
    ):
        response = await client.post(
            f"/api/{entity}",
            json={**payload, field: "2024-01-01T10:00:00+05:00"},
        )
        assert response.status_code == 201
        created = response.json()

        fetched = (await client.get(f"/api/{entity}/{created['id']}")).json()

        assert created == fetched
        assert fetched[field].startswith("2024-01-01T05:00:00")


class TestSoftDelete:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity, payload", PLAIN_ENTITIES.items())
    async def test_logical_delete_hides_entity(self, client: AsyncClient, entity, payload):
        created = (await client.post(f"/api/{entity}", json=payload)).json()

        response = await client.delete(f"/api/{entity}/logico/{created['id']}")
        assert response.status_code == 200

        listed = (await client.get(f"/api/{entity}")).json()
        assert created["id"] not in [item["id"] for item in listed]

        response = await client.get(f"/api/{entity}/{created['id']}")
        assert response.status_code == 404

        listed = (await client.get(f"/api/{entity}", params={"includeDeleted": "true"})).json()
        deleted = [item for item in listed if item["id"] == created["id"]]
        assert deleted and deleted[0]["isDeleted"] is True

    @pytest.mark.asyncio
    async def test_logical_delete_twice_is_404(self, client: AsyncClient, create_entity):
        rol = await create_entity("Rol", {"role": "Temp"})

        await client.delete(f"/api/Rol/logico/{rol['id']}")
        response = await client.delete(f"/api/Rol/logico/{rol['id']}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_grants_have_no_logical_delete(self, client: AsyncClient):
        response = await client.delete("/api/RolFormPermission/logico/1")
        assert response.status_code in (404, 405)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ALL_ENTITIES)
    async def test_hard_delete_missing_is_404(self, client: AsyncClient, entity):
        response = await client.delete(f"/api/{entity}/9999")
        assert response.status_code == 404


class TestUpdateMissing:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity", ALL_ENTITIES)
    async def test_update_missing_id_is_404(self, client: AsyncClient, create_entity, entity):
        payload = await valid_payload(entity, create_entity)

        response = await client.put(f"/api/{entity}", json={**payload, "id": 4242})
        assert response.status_code == 404

        response = await client.put(f"/api/{entity}/4242", json=payload)
        assert response.status_code == 404
