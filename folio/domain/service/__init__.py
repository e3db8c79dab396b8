"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .entry_service import EntryService
from .visibility import VisibilityService

__all__ = [
    "AuthService",
    "EntryService",
    "Service",
    "VisibilityService",
]
