"""Tests for registration, login and token refresh."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from threefold import models
from threefold.application.identity.use_cases import register_user_use_case
from threefold.core import container

PASSWORD = "correct-horse-battery"


class TestRegister:
    """Test suite for POST /auth/register endpoint."""

    def test_register_returns_tokens_for_free_account(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/auth/register", json={"email": "new@example.com", "password": PASSWORD}
        )

        assert response.status_code == status.HTTP_201_CREATED
        token = response.json()["access_token"]
        assert response.json()["token_type"] == "bearer"

        me = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["email"] == "new@example.com"
        assert me.json()["is_premium"] is False

    def test_register_duplicate_email(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.post(
            "/api/v1/auth/register", json={"email": test_user.email, "password": PASSWORD}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email already registered"

    def test_register_short_password(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/auth/register", json={"email": "new@example.com", "password": "short"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_register_disabled(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(register_user_use_case, "is_user_registrations_enabled", lambda: False)

        response = client.post(
            "/api/v1/auth/register", json={"email": "new@example.com", "password": PASSWORD}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestLogin:
    def test_login_success(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login", data={"username": test_user.email, "password": PASSWORD}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]
        assert "refresh_token" in response.cookies

    def test_login_wrong_password(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login", data={"username": test_user.email, "password": "wrong-password"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_unknown_email(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/auth/login", data={"username": "ghost@example.com", "password": PASSWORD}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestRefresh:
    def test_refresh_with_body_token(self, client: TestClient, test_user: models.User) -> None:
        refresh_token = container.token_service().create_refresh_token(test_user.id)
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": refresh_token})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]

    def test_refresh_rejects_access_token(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        access_token = auth_headers["Authorization"].removeprefix("Bearer ")

        response = client.post("/api/v1/auth/refresh", json={"refresh_token": access_token})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_without_token(self, client: TestClient) -> None:
        response = client.post("/api/v1/auth/refresh")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestCurrentUser:
    def test_me_reports_premium_flag(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/users/me", headers=premium_headers)

        assert response.json()["is_premium"] is True

    def test_me_requires_valid_token(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me", headers={"Authorization": "Bearer nope"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
