"""Admin login use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from folio.domain.service import AuthService
from folio.util.jwt import verify_token


class LoginRequest(BaseModel):
    """Admin login request."""

    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    expires_at: datetime


class LoginUseCase:
    """Use case for the single-admin password login."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Admin authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request with the submitted password

        Returns:
            Session token and its expiry

        Raises:
            AuthenticationError: If the password is wrong
        """
        with logfire.span("login.execute"):
            token = self.auth_service.login(request.password)
            payload = verify_token(token, self.auth_service.auth_settings)
            return LoginResponse(token=token, expires_at=payload.exp)
