"""Mock persistence providers for testing."""

from dishka import Scope, provide

from folio.domain.repository import EntryRepository
from folio.persistence.repository.inmemory import InMemoryEntryRepository
from folio.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so entries survive across requests made against one
    container; each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_entry_repository(self) -> EntryRepository:
        """Provide in-memory entry repository."""
        return InMemoryEntryRepository()
