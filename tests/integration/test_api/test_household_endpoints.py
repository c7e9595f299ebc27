import pytest


@pytest.mark.integration
class TestHouseholdEndpoints:
    """Integration tests for household creation, lookup and joining."""

    def test_create_household(self, client, storage, test_user, auth_headers):
        response = client.post("/api/households", json={"name": "Flat 4"}, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Flat 4"
        assert data["created_by_id"] == test_user.id

        creator = storage.get_user(test_user.id)
        assert creator.household_id == data["id"]
        assert creator.is_household_admin is True

    def test_create_household_while_member_moves_caller(
        self, client, storage, test_user, household, auth_headers
    ):
        response = client.post("/api/households", json={"name": "Second"}, headers=auth_headers)

        assert response.status_code == 201
        second_id = response.json()["data"]["id"]
        assert second_id != household.id
        moved = storage.get_user(test_user.id)
        assert moved.household_id == second_id
        assert moved.is_household_admin is True
        assert storage.get_household_members(household.id) == []
        assert client.get(f"/api/households/{household.id}", headers=auth_headers).status_code == 404

    def test_create_household_requires_auth(self, client):
        response = client.post("/api/households", json={"name": "Flat 4"})

        assert response.status_code == 401

    def test_create_household_invalid_name(self, client, auth_headers):
        response = client.post("/api/households", json={"name": ""}, headers=auth_headers)

        assert response.status_code == 400

    def test_get_household(self, client, household, auth_headers):
        response = client.get(f"/api/households/{household.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Test Home"

    def test_get_household_of_others_is_not_found(self, client, household, make_user, login):
        make_user("outsider")

        response = client.get(f"/api/households/{household.id}", headers=login("outsider"))

        assert response.status_code == 404

    def test_get_missing_household(self, client, household, auth_headers):
        response = client.get("/api/households/9999", headers=auth_headers)

        assert response.status_code == 404

    def test_members(self, client, storage, household, make_user, auth_headers):
        housemate = make_user("housemate")
        storage.add_user_to_household(housemate.id, household.id)

        response = client.get(f"/api/households/{household.id}/members", headers=auth_headers)

        assert response.status_code == 200
        members = response.json()["data"]
        assert sorted(m["username"] for m in members) == ["housemate", "testuser"]
        assert all("hashed_password" not in m for m in members)

    def test_members_of_others_is_not_found(self, client, household, make_user, login):
        make_user("outsider")

        response = client.get(
            f"/api/households/{household.id}/members", headers=login("outsider")
        )

        assert response.status_code == 404

    def test_join_household(self, client, household, make_user, login):
        newcomer = make_user("newcomer")

        response = client.post(
            f"/api/households/{household.id}/join", headers=login("newcomer")
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == newcomer.id
        assert data["household_id"] == household.id
        assert data["is_household_admin"] is False

    def test_join_missing_household(self, client, test_user, auth_headers):
        response = client.post("/api/households/9999/join", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Household not found"

    def test_join_when_already_member(self, client, household, auth_headers):
        response = client.post(f"/api/households/{household.id}/join", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Already in a household"
