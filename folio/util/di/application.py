"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.auth import GetCurrentAdminUseCase, LoginUseCase
from folio.application.usecase.content import (
    GetPublishedUseCase,
    ListPublishedUseCase,
)
from folio.application.usecase.entry import (
    CreateEntryUseCase,
    GetDashboardUseCase,
    GetEntryUseCase,
    ListEntriesUseCase,
    SetPublicationUseCase,
    UpdateEntryUseCase,
)
from folio.application.usecase.markup import ConvertMathUseCase
from folio.config import PublishingSettings
from folio.domain.service import AuthService, EntryService, VisibilityService
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_current_admin_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentAdminUseCase:
        """Provide get current admin use case."""
        return GetCurrentAdminUseCase(auth_service=auth_service)

    # Admin entry use cases
    @provide(scope=Scope.REQUEST)
    def get_create_entry_use_case(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> CreateEntryUseCase:
        """Provide create entry use case."""
        return CreateEntryUseCase(
            entry_service=entry_service, visibility_service=visibility_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_entry_use_case(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> UpdateEntryUseCase:
        """Provide update entry use case."""
        return UpdateEntryUseCase(
            entry_service=entry_service, visibility_service=visibility_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_entry_use_case(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> GetEntryUseCase:
        """Provide get entry use case."""
        return GetEntryUseCase(
            entry_service=entry_service, visibility_service=visibility_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_entries_use_case(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> ListEntriesUseCase:
        """Provide list entries use case."""
        return ListEntriesUseCase(
            entry_service=entry_service, visibility_service=visibility_service
        )

    @provide(scope=Scope.REQUEST)
    def get_set_publication_use_case(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> SetPublicationUseCase:
        """Provide set publication use case."""
        return SetPublicationUseCase(
            entry_service=entry_service, visibility_service=visibility_service
        )

    @provide(scope=Scope.REQUEST)
    def get_dashboard_use_case(self, entry_service: EntryService) -> GetDashboardUseCase:
        """Provide dashboard use case."""
        return GetDashboardUseCase(entry_service=entry_service)

    # Public content use cases
    @provide(scope=Scope.REQUEST)
    def get_list_published_use_case(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> ListPublishedUseCase:
        """Provide list published use case."""
        return ListPublishedUseCase(
            entry_service=entry_service, visibility_service=visibility_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_published_use_case(
        self,
        entry_service: EntryService,
        visibility_service: VisibilityService,
        settings: PublishingSettings,
    ) -> GetPublishedUseCase:
        """Provide get published use case."""
        return GetPublishedUseCase(
            entry_service=entry_service,
            visibility_service=visibility_service,
            settings=settings,
        )

    # Markup use cases
    @provide(scope=Scope.REQUEST)
    def get_convert_math_use_case(self) -> ConvertMathUseCase:
        """Provide convert math use case."""
        return ConvertMathUseCase()
