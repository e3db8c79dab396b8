"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import AuthSettings, PublishingSettings
from folio.domain.repository import EntryRepository
from folio.domain.service import AuthService, EntryService, VisibilityService
from folio.util.clock import Clock
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, auth_settings: AuthSettings) -> AuthService:
        """Provide admin authentication domain service."""
        return AuthService(auth_settings=auth_settings)

    @provide
    def get_entry_service(self, entry_repository: EntryRepository) -> EntryService:
        """Provide entry domain service."""
        return EntryService(entry_repository=entry_repository)

    @provide
    def get_visibility_service(
        self, clock: Clock, settings: PublishingSettings
    ) -> VisibilityService:
        """Provide visibility domain service."""
        return VisibilityService(clock=clock, settings=settings)
