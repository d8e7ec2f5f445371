"""Tests for registration, login and token refresh."""

from fastapi import status

from blog_api.core import security
from blog_api.models import ActivityStatus

from conftest import TEST_PASSWORD


def test_register_creates_user_and_tokens(client) -> None:
    r = client.post(
        "/api/v1/auth/register",
        json={"email": "New.User@Example.com", "password": "hunter22"},
    )
    assert r.status_code == status.HTTP_201_CREATED
    data = r.json()
    assert data["user"]["email"] == "new.user@example.com"
    assert data["user"]["first_name"] == "Jonathan"
    assert data["user"]["activity_status"] == "non-active"
    assert data["tokens"]["token_type"] == "bearer"

    payload = security.decode_token(data["tokens"]["access_token"], security.ACCESS_TOKEN_TYPE)
    assert payload["sub"] == str(data["user"]["id"])


def test_register_rejects_duplicate_email(client, test_user) -> None:
    r = client.post(
        "/api/v1/auth/register",
        json={"email": test_user.email.upper(), "password": "hunter22"},
    )
    assert r.status_code == status.HTTP_409_CONFLICT
    assert r.json()["detail"] == "Email or username is already in use"


def test_register_validates_payload(client) -> None:
    r = client.post("/api/v1/auth/register", json={"email": "not-an-email", "password": "x"})
    assert r.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_login_success(client, test_user) -> None:
    r = client.post(
        "/api/v1/auth/login",
        json={"email": test_user.email, "password": TEST_PASSWORD},
    )
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["user"]["id"] == test_user.id
    assert data["tokens"]["access_token"]
    assert data["tokens"]["refresh_token"]


def test_login_unknown_email(client) -> None:
    r = client.post(
        "/api/v1/auth/login",
        json={"email": "ghost@example.com", "password": TEST_PASSWORD},
    )
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert r.json()["detail"] == "User not found"


def test_login_wrong_password(client, test_user) -> None:
    r = client.post(
        "/api/v1/auth/login",
        json={"email": test_user.email, "password": "definitely-wrong"},
    )
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert r.json()["detail"] == "Invalid password"


def test_login_banned_user(client, db_session, test_user) -> None:
    test_user.activity_status = ActivityStatus.BANNED.value
    db_session.flush()

    r = client.post(
        "/api/v1/auth/login",
        json={"email": test_user.email, "password": TEST_PASSWORD},
    )
    assert r.status_code == status.HTTP_403_FORBIDDEN


def test_refresh_issues_new_pair(client, test_user) -> None:
    refresh = security.create_refresh_token(test_user.id)
    r = client.post("/api/v1/auth/refresh-token", json={"refresh_token": refresh})
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    payload = security.decode_token(data["refresh_token"], security.REFRESH_TOKEN_TYPE)
    assert payload["sub"] == str(test_user.id)
    assert payload["email"] == test_user.email


def test_refresh_rejects_access_token(client, test_user) -> None:
    access = security.create_access_token(test_user.id)
    r = client.post("/api/v1/auth/refresh-token", json={"refresh_token": access})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert r.json()["detail"] == "Invalid token"


def test_refresh_rejects_garbage(client) -> None:
    r = client.post("/api/v1/auth/refresh-token", json={"refresh_token": "not.a.jwt"})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED


def test_refresh_rejects_deleted_user(client) -> None:
    refresh = security.create_refresh_token(999_999)
    r = client.post("/api/v1/auth/refresh-token", json={"refresh_token": refresh})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
