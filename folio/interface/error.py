"""Interface layer errors.

Translates domain errors raised by use cases into HTTP responses.
"""

import logfire
from fastapi import HTTPException, status

from folio.domain.error import (
    AuthenticationError,
    DomainError,
    InvalidTimestamp,
    NotFoundError,
    SlugConflictError,
)
from folio.util.jwt import JWTError


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised while handling a request to an HTTPException.

    Args:
        error: The raised error
        action: What the route was doing, for logs and the 500 detail

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, (AuthenticationError, JWTError)):
        logfire.warn(f"{action}: unauthorized", error=str(error))
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action}: not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (InvalidTimestamp, SlugConflictError)):
        logfire.warn(f"{action}: rejected", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, (DomainError, ValueError)):
        logfire.warn(f"{action}: validation error", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(f"Unexpected error: {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
