import pytest


@pytest.mark.integration
class TestAuthEndpoints:
    """Integration tests for registration, login and the current-user endpoint."""

    def test_register(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "newuser", "password": "password123"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["username"] == "newuser"
        assert body["data"]["household_id"] is None
        assert body["data"]["is_household_admin"] is False
        assert "hashed_password" not in body["data"]

    def test_register_duplicate_username(self, client, test_user):
        response = client.post(
            "/api/auth/register",
            json={"username": "testuser", "password": "password123"}
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_register_invalid_input(self, client):
        response = client.post("/api/auth/register", json={"username": "ab", "password": "x"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["category"] == "Validation"
        assert "username" in error["message"]

    def test_login_and_me(self, client, test_user):
        response = client.post(
            "/api/auth/login",
            data={"username": "testuser", "password": "testpass123"}
        )
        assert response.status_code == 200
        token = response.json()["data"]["access_token"]

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert me.status_code == 200
        assert me.json()["data"]["id"] == test_user.id

    def test_login_wrong_password(self, client, test_user):
        response = client.post(
            "/api/auth/login",
            data={"username": "testuser", "password": "wrongpassword"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["category"] == "Authentication"

    def test_me_requires_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_me_with_garbage_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    def test_refresh(self, client, test_user):
        login = client.post(
            "/api/auth/login",
            data={"username": "testuser", "password": "testpass123"}
        ).json()["data"]

        response = client.post(
            "/api/auth/refresh", params={"refresh_token": login["refresh_token"]}
        )

        assert response.status_code == 200
        assert response.json()["data"]["token_type"] == "bearer"

    def test_logout(self, client, auth_headers):
        response = client.post("/api/auth/logout", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["message"] == "Successfully logged out"


@pytest.mark.integration
class TestUserEndpoints:
    """Integration tests for viewing other users."""

    def test_view_self_without_household(self, client, test_user, auth_headers):
        response = client.get(f"/api/users/{test_user.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["username"] == "testuser"

    def test_view_housemate(self, client, storage, household, make_user, auth_headers):
        housemate = make_user("housemate")
        storage.add_user_to_household(housemate.id, household.id)

        response = client.get(f"/api/users/{housemate.id}", headers=auth_headers)

        assert response.status_code == 200

    def test_view_outsider_is_not_found(self, client, household, make_user, auth_headers):
        outsider = make_user("outsider")

        response = client.get(f"/api/users/{outsider.id}", headers=auth_headers)

        assert response.status_code == 404

    def test_view_missing_user(self, client, auth_headers):
        response = client.get("/api/users/9999", headers=auth_headers)

        assert response.status_code == 404


@pytest.mark.integration
def test_root_and_health(client):
    assert client.get("/").json()["data"]["status"] == "online"
    assert client.get("/health").json()["data"]["status"] == "healthy"
