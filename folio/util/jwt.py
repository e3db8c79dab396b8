"""Signed session tokens for the admin cookie (PyJWT)."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from folio.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str
    exp: datetime
    iat: datetime


class JWTError(Exception):
    """Session token is malformed, forged or expired."""

    pass


def create_token(subject: str, settings: AuthSettings) -> str:
    """Sign a session token valid for ``jwt_expiry_days``.

    PyJWT checks ``exp`` against the system clock, so issue time comes from
    the system clock as well, never from the injected publishing clock.

    Args:
        subject: Principal the token stands for
        settings: Authentication settings

    Returns:
        Encoded token
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": subject,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a session token.

    Raises:
        JWTError: If the token is expired, badly signed or missing a claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    return TokenPayload(**claims)
