# ==============================================================================
# USER ENDPOINT TESTS
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestUserEndpoints:

    @pytest.mark.asyncio
    async def test_password_never_returned(self, client: AsyncClient, sample_user_data):
        response = await client.post("/api/User", json=sample_user_data)

        assert response.status_code == 201
        created = response.json()
        assert "password" not in created
        assert created["userName"] == sample_user_data["userName"]
        assert created["registrationDate"] is not None

        listed = (await client.get("/api/User")).json()
        assert all("password" not in user for user in listed)

    @pytest.mark.asyncio
    async def test_blank_username_is_400(self, client: AsyncClient):
        response = await client.post("/api/User", json={"UserName": " ", "password": "x"})

        assert response.status_code == 400
        assert "userName" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_person_must_exist(self, client: AsyncClient, sample_user_data):
        response = await client.post("/api/User", json={**sample_user_data, "personId": 77})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_keeps_registration_date(
        self, client: AsyncClient, create_entity, sample_user_data
    ):
        user = await create_entity("User", sample_user_data)

        response = await client.put(
            "/api/User",
            json={
                "id": user["id"],
                "userName": "renamed",
                "registrationDate": "1999-01-01T00:00:00",
            },
        )

        assert response.status_code == 200
        assert response.json()["userName"] == "renamed"
        assert not response.json()["registrationDate"].startswith("1999")
