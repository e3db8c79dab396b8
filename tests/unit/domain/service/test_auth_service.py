"""Unit tests for AuthService."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest
from dishka import AsyncContainer

from folio.config import AuthSettings
from folio.domain.error import AuthenticationError
from folio.domain.service import AuthService
from folio.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TestLogin:
    @pytest.mark.asyncio
    async def test_correct_password_issues_admin_token(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        settings = await unit_env.get(AuthSettings)

        token = auth_service.login(settings.admin_password)

        payload = auth_service.verify_token(token)
        assert payload.sub == "admin"
        assert payload.exp > datetime.now(timezone.utc)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["", "wrong", "CHANGE_ME"])
    async def test_wrong_password_rejected(self, unit_env: AsyncContainer, password):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthenticationError, match="Invalid password"):
            auth_service.login(password)


class TestVerifyToken:
    """Tests for session token verification."""

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        settings = await unit_env.get(AuthSettings)
        forged = pyjwt.encode(
            {"sub": "admin", "iat": _now(), "exp": _now() + timedelta(days=1)},
            "some-other-secret-that-is-long-enough",
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            auth_service.verify_token(forged)

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        settings = await unit_env.get(AuthSettings)
        expired = pyjwt.encode(
            {"sub": "admin", "iat": _now(), "exp": _now() - timedelta(minutes=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            auth_service.verify_token(expired)

    @pytest.mark.asyncio
    async def test_non_admin_subject(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        settings = await unit_env.get(AuthSettings)
        token = pyjwt.encode(
            {"sub": "someone", "iat": _now(), "exp": _now() + timedelta(days=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            auth_service.verify_token(token)

    @pytest.mark.asyncio
    async def test_is_authenticated(self, unit_env: AsyncContainer):
        auth_service = await unit_env.get(AuthService)
        settings = await unit_env.get(AuthSettings)
        token = auth_service.login(settings.admin_password)

        assert auth_service.is_authenticated(token) is True
        assert auth_service.is_authenticated(token + "x") is False
        assert auth_service.is_authenticated("") is False
        assert auth_service.is_authenticated(None) is False
