"""Tests for login, token issuing and the role guard."""

import uuid
from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from walks_api.auth.jwt import (
    RoleChecker,
    create_access_token,
    decode_access_token,
    get_token_claims,
    hash_password,
    verify_password,
)
from walks_api.config import get_settings
from walks_api.models import Role, User

WRITER_USERNAME = "readwrite@user.com"
WRITER_PASSWORD = "Readwrite@user"
READER_USERNAME = "readonly@user.com"
READER_PASSWORD = "Readonly@user"


def _user(*role_names: str) -> User:
    return User(
        id=uuid.uuid4(),
        username="ranger@doc.govt.nz",
        email_address="ranger@doc.govt.nz",
        password_hash="unused",
        first_name="Kiri",
        last_name="Ranger",
        roles=[Role(name=name) for name in role_names],
    )


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("Tramping@2024")

        assert hashed != "Tramping@2024"
        assert verify_password("Tramping@2024", hashed)
        assert not verify_password("tramping@2024", hashed)


class TestAccessToken:

    def test_token_carries_identity_and_roles(self):
        user = _user("reader", "writer")

        claims = decode_access_token(create_access_token(user))

        assert claims["sub"] == str(user.id)
        assert claims["unique_name"] == "ranger@doc.govt.nz"
        assert claims["given_name"] == "Kiri"
        assert claims["family_name"] == "Ranger"
        assert claims["email"] == "ranger@doc.govt.nz"
        assert claims["roles"] == ["reader", "writer"]

    def test_token_expires_after_configured_window(self):
        settings = get_settings()
        token = create_access_token(_user("reader"))

        claims = jwt.get_unverified_claims(token)

        assert claims["exp"] - claims["iat"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
        assert claims["iss"] == settings.JWT_ISSUER
        assert claims["aud"] == settings.JWT_AUDIENCE

    def test_expired_token_rejected(self):
        token = create_access_token(_user("writer"), expires_delta=timedelta(seconds=-30))

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.status_code == 401

    def test_token_signed_with_other_key_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": "someone", "aud": settings.JWT_AUDIENCE, "iss": settings.JWT_ISSUER},
            "some-other-key",
            algorithm=settings.JWT_ALGORITHM,
        )

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.status_code == 401


class TestRoleChecker:

    @pytest.mark.asyncio
    async def test_allows_matching_role(self):
        checker = RoleChecker("writer")
        claims = {"sub": "abc", "roles": ["reader", "writer"]}

        assert await checker(claims) is claims

    @pytest.mark.asyncio
    async def test_single_role_claim_as_string(self):
        checker = RoleChecker("writer")

        assert await checker({"sub": "abc", "roles": "writer"})

    @pytest.mark.asyncio
    async def test_missing_role_is_forbidden(self):
        checker = RoleChecker("writer")

        with pytest.raises(HTTPException) as exc_info:
            await checker({"sub": "abc", "roles": ["reader"]})

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_no_credentials_is_unauthorized(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_token_claims(None)

        assert exc_info.value.status_code == 401


class TestLoginEndpoint:
    """POST /Authentication/login"""

    @pytest.mark.asyncio
    async def test_login_returns_token(self, test_client):
        response = await test_client.post(
            "/Authentication/login",
            json={"Username": WRITER_USERNAME, "Password": WRITER_PASSWORD},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["tokenType"] == "bearer"
        assert body["expiresIn"] == get_settings().ACCESS_TOKEN_EXPIRE_MINUTES * 60
        assert decode_access_token(body["token"])["roles"] == ["reader", "writer"]

    @pytest.mark.asyncio
    async def test_username_is_case_insensitive(self, test_client):
        response = await test_client.post(
            "/Authentication/login",
            json={"username": READER_USERNAME.upper(), "password": READER_PASSWORD},
        )

        assert response.status_code == 200
        assert decode_access_token(response.json()["token"])["roles"] == ["reader"]

    @pytest.mark.asyncio
    async def test_wrong_password_is_400_without_token(self, test_client):
        response = await test_client.post(
            "/Authentication/login",
            json={"Username": WRITER_USERNAME, "Password": "wrong"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Username or Password is incorrect."}

    @pytest.mark.asyncio
    async def test_unknown_user_is_400(self, test_client):
        response = await test_client.post(
            "/Authentication/login",
            json={"Username": "nobody@user.com", "Password": "whatever"},
        )

        assert response.status_code == 400
        assert "token" not in response.json()

    @pytest.mark.asyncio
    async def test_issued_token_opens_writer_routes(self, test_client, region, walk_difficulty):
        login = await test_client.post(
            "/Authentication/login",
            json={"Username": WRITER_USERNAME, "Password": WRITER_PASSWORD},
        )
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        response = await test_client.post(
            "/Walks",
            json={
                "Name": "Queen Charlotte Track",
                "Length": 70,
                "RegionId": str(region.id),
                "WalkDifficultyId": str(walk_difficulty.id),
            },
            headers=headers,
        )

        assert response.status_code == 201
