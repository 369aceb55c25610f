"""Unit tests for registration and sign-in routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

from fastapi import status
from fastapi.testclient import TestClient

from iam.domain.aggregates import User
from iam.ports.exceptions import DuplicateUsernameError, InvalidCredentialsError
from shared_kernel.exceptions import ValidationError


class TestRegister:
    """Tests for POST /auth/register."""

    def test_creates_account_and_signs_in(
        self,
        test_client: TestClient,
        mock_user_service: AsyncMock,
        registered_user: User,
    ) -> None:
        mock_user_service.register.return_value = registered_user

        response = test_client.post(
            "/auth/register",
            json={"username": "alice", "password": "s3cret", "email": "alice@example.com"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {
            "user_id": registered_user.id.value,
            "username": "alice",
        }
        mock_user_service.register.assert_called_once_with(
            username="alice", raw_credential="s3cret", email="alice@example.com"
        )
        mock_user_service.get_user.return_value = registered_user
        assert test_client.get("/users/me").status_code == status.HTTP_200_OK

    def test_validation_error_returns_422_with_field_errors(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.register.side_effect = ValidationError(
            {"email": "Email address is not valid"}
        )

        response = test_client.post(
            "/auth/register",
            json={"username": "alice", "password": "s3cret", "email": "nope"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"]["field_errors"] == {
            "email": "Email address is not valid"
        }

    def test_missing_fields_reach_service_as_blank(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.register.side_effect = ValidationError(
            {"username": "Username is required"}
        )

        response = test_client.post("/auth/register", json={})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        mock_user_service.register.assert_called_once_with(
            username="", raw_credential="", email=""
        )

    def test_duplicate_username_returns_409(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.register.side_effect = DuplicateUsernameError("taken")

        response = test_client.post(
            "/auth/register",
            json={"username": "alice", "password": "s3cret", "email": "alice@example.com"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_failed_registration_does_not_sign_in(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.register.side_effect = DuplicateUsernameError("taken")

        test_client.post(
            "/auth/register",
            json={"username": "alice", "password": "s3cret", "email": "alice@example.com"},
        )

        assert test_client.get("/users/me").status_code == status.HTTP_401_UNAUTHORIZED

    def test_unexpected_error_returns_500(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.register.side_effect = RuntimeError("boom")

        response = test_client.post(
            "/auth/register",
            json={"username": "alice", "password": "s3cret", "email": "alice@example.com"},
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


class TestLogin:
    """Tests for POST /auth/login."""

    def test_signs_in(
        self,
        test_client: TestClient,
        mock_user_service: AsyncMock,
        registered_user: User,
    ) -> None:
        mock_user_service.authenticate.return_value = registered_user

        response = test_client.post(
            "/auth/login", json={"username": "alice", "password": "s3cret"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["username"] == "alice"

    def test_bad_credentials_return_401(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.authenticate.side_effect = InvalidCredentialsError()

        response = test_client.post(
            "/auth/login", json={"username": "alice", "password": "wrong"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Username or password is incorrect"

    def test_blank_fields_return_422(
        self, test_client: TestClient, mock_user_service: AsyncMock
    ) -> None:
        mock_user_service.authenticate.side_effect = ValidationError(
            {"username": "Enter your username"}
        )

        response = test_client.post("/auth/login", json={})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestLogout:
    """Tests for POST /auth/logout."""

    def test_clears_session(
        self,
        test_client: TestClient,
        mock_user_service: AsyncMock,
        registered_user: User,
    ) -> None:
        mock_user_service.authenticate.return_value = registered_user
        mock_user_service.get_user.return_value = registered_user
        test_client.post("/auth/login", json={"username": "alice", "password": "s3cret"})

        response = test_client.post("/auth/logout")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert test_client.get("/users/me").status_code == status.HTTP_401_UNAUTHORIZED

    def test_anonymous_logout_succeeds(self, test_client: TestClient) -> None:
        response = test_client.post("/auth/logout")

        assert response.status_code == status.HTTP_204_NO_CONTENT
