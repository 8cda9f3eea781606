"""
Tests for registration, email confirmation, login and session restore
"""
import pytest

from api.auth import create_access_token, create_confirmation_token


class TestRegistration:
    """Test POST /api/auth/register"""

    def test_register_creates_user(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "  Ada@Example.com ", "password": "secret123", "full_name": "Ada Lovelace"},
        )
        assert response.status_code == 201
        user = response.json()["user"]
        assert user["email"] == "ada@example.com"
        assert user["role"] == "user"
        assert user["email_confirmed"] is True

    def test_register_duplicate_email(self, client, auth_headers):
        response = client.post(
            "/api/auth/register",
            json={"email": "ada@example.com", "password": "secret123", "full_name": "Ada Again"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.parametrize("payload", [
        {"email": "not-an-email", "password": "secret123", "full_name": "Ada Lovelace"},
        {"email": "ada@example.com", "password": "123", "full_name": "Ada Lovelace"},
        {"email": "ada@example.com", "password": "secret123", "full_name": " A "},
    ])
    def test_register_validation(self, client, payload):
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 422


class TestEmailConfirmation:
    """Test the confirmation flow when confirmation is required"""

    @pytest.fixture(autouse=True)
    def require_confirmation(self, monkeypatch):
        monkeypatch.setenv("REQUIRE_EMAIL_CONFIRMATION", "true")

    def _register(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "ada@example.com", "password": "secret123", "full_name": "Ada Lovelace"},
        )
        assert response.status_code == 201
        return response.json()

    def test_new_user_is_unconfirmed(self, client):
        body = self._register(client)
        assert body["user"]["email_confirmed"] is False
        assert "confirm" in body["message"].lower()

    def test_login_blocked_until_confirmed(self, client):
        self._register(client)
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
        assert response.status_code == 403

    def test_confirm_then_login(self, client):
        self._register(client)
        token = create_confirmation_token("ada@example.com")

        response = client.post("/api/auth/confirm-email", json={"token": token})
        assert response.status_code == 200
        assert response.json()["email_confirmed"] is True

        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_confirm_rejects_access_token(self, client):
        self._register(client)
        token = create_access_token({"sub": "ada@example.com"})
        response = client.post("/api/auth/confirm-email", json={"token": token})
        assert response.status_code == 400

    def test_confirm_rejects_garbage(self, client):
        response = client.post("/api/auth/confirm-email", json={"token": "nope"})
        assert response.status_code == 400


class TestLogin:
    """Test POST /api/auth/login"""

    def test_wrong_password(self, client, auth_headers):
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "wrong-one"})
        assert response.status_code == 401

    def test_unknown_user(self, client):
        response = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
        assert response.status_code == 401


class TestSession:
    """Test GET/PUT /api/auth/me"""

    def test_me_restores_session(self, client, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "ada@example.com"

    def test_me_requires_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code in (401, 403)

    def test_me_rejects_invalid_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer invalid"})
        assert response.status_code == 401

    def test_confirmation_token_is_not_a_session(self, client, auth_headers):
        token = create_confirmation_token("ada@example.com")
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_update_full_name(self, client, auth_headers):
        response = client.put("/api/auth/me", json={"full_name": "Augusta Ada King"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["full_name"] == "Augusta Ada King"
