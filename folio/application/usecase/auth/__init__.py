"""Authentication use cases."""

from .get_current_admin import (
    GetCurrentAdminRequest,
    GetCurrentAdminResponse,
    GetCurrentAdminUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase

__all__ = [
    "GetCurrentAdminRequest",
    "GetCurrentAdminResponse",
    "GetCurrentAdminUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
]
