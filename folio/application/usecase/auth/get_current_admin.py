"""Get current admin use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.domain.service import AuthService


class GetCurrentAdminRequest(BaseModel):
    """Get current admin request."""

    token: str  # JWT token


class GetCurrentAdminResponse(BaseModel):
    """Get current admin response."""

    authenticated: bool
    subject: str
    expires_at: datetime


class GetCurrentAdminUseCase:
    """Use case for checking the admin session token."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentAdminRequest) -> GetCurrentAdminResponse:
        """Execute get current admin flow.

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.auth_service.verify_token(request.token)
        return GetCurrentAdminResponse(
            authenticated=True, subject=payload.sub, expires_at=payload.exp
        )
