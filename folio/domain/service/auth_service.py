"""Admin authentication domain service."""

import secrets

import logfire

from folio.config import AuthSettings
from folio.domain.error import AuthenticationError
from folio.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service

ADMIN_SUBJECT = "admin"


class AuthService(Service):
    """Domain service for the single admin account.

    Checks the configured password and issues/verifies the session token
    carried in the admin cookie.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def login(self, password: str) -> str:
        """Check the admin password and issue a session token.

        Args:
            password: Submitted password

        Returns:
            JWT token string

        Raises:
            AuthenticationError: If the password is wrong
        """
        with logfire.span("auth_service.login"):
            if not secrets.compare_digest(
                password.encode("utf-8"),
                self.auth_settings.admin_password.encode("utf-8"),
            ):
                logfire.warn("Admin login rejected")
                raise AuthenticationError("Invalid password")

            token = create_token(ADMIN_SUBJECT, self.auth_settings)
            logfire.info("Admin session token created")
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid, expired or not an admin token
        """
        with logfire.span("auth_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Admin token verification failed", error=str(e))
                raise

            if payload.sub != ADMIN_SUBJECT:
                logfire.warn("Token subject is not the admin", subject=payload.sub)
                raise JWTError("Invalid token")

            return payload

    def is_authenticated(self, token: str | None) -> bool:
        """Check a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            True if the token is a valid admin session token
        """
        if not token:
            return False

        try:
            self.verify_token(token)
            return True
        except JWTError:
            return False
