"""Tests for the auth and profile endpoints."""
from datetime import timedelta

import pytest

from core.database.entities import User
from core.services.auth.auth_service import auth_service


def register(client, **overrides):
    payload = {"name": "Ana", "email": "ana@x.com", "password": "secret1"}
    payload.update(overrides)
    return client.post("/api/auth/register", json=payload)


def login(client, email="ana@x.com", password="secret1"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


class TestRegisterEndpoint:
    """Test cases for POST /api/auth/register."""

    def test_register_created(self, client):
        response = register(client, location="Lisbon")
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Ana"
        assert body["email"] == "ana@x.com"
        assert body["location"] == "Lisbon"
        assert body["role"] == "user"
        assert "password" not in body

    def test_register_ignores_role_in_payload(self, client):
        response = register(client, role="admin")
        assert response.status_code == 201
        assert response.json()["role"] == "user"

    def test_register_duplicate_conflict(self, client):
        register(client)
        response = register(client, email="ANA@x.com")
        assert response.status_code == 409

    def test_register_validation_error_names_field(self, client):
        response = register(client, password="123")
        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "password"

    @pytest.mark.parametrize("email", ["ana@x..com", "ana@x.com.", ".ana@x.com"])
    def test_register_malformed_email(self, client, email):
        response = register(client, email=email)
        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "email"

    def test_register_missing_field(self, client):
        response = client.post("/api/auth/register", json={"email": "ana@x.com", "password": "secret1"})
        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "name"


class TestLoginEndpoint:
    """Test cases for POST /api/auth/login."""

    def test_login_returns_token(self, client):
        register(client)
        response = login(client)
        assert response.status_code == 200
        assert response.json()["token"]

    def test_login_failures_are_indistinguishable(self, client):
        register(client)
        wrong_password = login(client, password="wrong-password")
        unknown_email = login(client, email="ghost@x.com")
        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()


class TestProfileEndpoint:
    """Test cases for GET /api/profile."""

    def test_register_login_profile_scenario(self, client):
        """Ana registers, logs in and reads her own record minus password."""
        created = register(client).json()
        token = login(client).json()["token"]

        response = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["name"] == "Ana"
        assert body["email"] == "ana@x.com"
        assert "password" not in body

    def test_profile_without_token(self, client):
        response = client.get("/api/profile")
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_profile_with_garbage_token(self, client):
        response = client.get("/api/profile", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_profile_with_expired_token(self, client):
        user_id = register(client).json()["id"]
        token = auth_service.create_access_token(
            {"sub": user_id, "role": "user"}, expires_delta=timedelta(minutes=-1)
        )
        response = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_profile_for_deleted_user(self, client, db_session):
        register(client)
        token = login(client).json()["token"]

        db_session.query(User).delete()
        db_session.commit()

        response = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["detail"] == "User not found"


class TestHealthEndpoints:
    """Test cases for health checks."""

    def test_root_and_health(self, client):
        assert client.get("/").json()["status"] == "running"
        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/api/auth/health").json()["service"] == "auth"
