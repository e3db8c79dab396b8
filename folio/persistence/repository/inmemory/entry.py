"""In-memory entry repository for testing."""

from datetime import datetime
from typing import Optional

from folio.domain.model.entry import Entry
from folio.domain.repository.entry import EntryRepository
from folio.domain.service.tags import matches_tag_filter
from folio.domain.value import ContentKind, EntryId, Slug


class InMemoryEntryRepository(EntryRepository):
    """In-memory implementation of EntryRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[EntryId, Entry] = {}

    async def find_by_id(self, entry_id: EntryId) -> Optional[Entry]:
        """Find an entry by ID."""
        return self._entries.get(entry_id)

    async def find_by_slug(self, kind: ContentKind, slug: Slug) -> Optional[Entry]:
        """Find an entry by slug within a kind."""
        for entry in self._entries.values():
            if entry.kind == kind and entry.slug == slug:
                return entry
        return None

    async def slug_exists(
        self,
        kind: ContentKind,
        slug: Slug,
        exclude_id: Optional[EntryId] = None,
    ) -> bool:
        """Check if a slug is taken within a kind."""
        return any(
            entry.kind == kind and entry.slug == slug and entry.id != exclude_id
            for entry in self._entries.values()
        )

    async def find_published(
        self,
        kind: ContentKind,
        published_before: datetime,
        tag: Optional[str] = None,
        case_sensitive: bool = False,
        exclude_id: Optional[EntryId] = None,
        limit: Optional[int] = None,
    ) -> list[Entry]:
        """Find entries published at or before the given instant."""
        entries = [
            e
            for e in self._entries.values()
            if e.kind == kind
            and e.published_at is not None
            and e.published_at <= published_before
            and e.id != exclude_id
            and matches_tag_filter(e.tags, tag, case_sensitive=case_sensitive)
        ]
        entries.sort(key=lambda e: e.published_at, reverse=True)

        if limit is not None:
            return entries[:limit]
        return entries

    async def find_all(self, kind: ContentKind) -> list[Entry]:
        """Find every entry of a kind, newest created first."""
        entries = [e for e in self._entries.values() if e.kind == kind]
        entries.sort(key=lambda e: e.created_at, reverse=True)
        return entries

    async def count(self, kind: ContentKind) -> int:
        """Count entries of a kind."""
        return sum(1 for e in self._entries.values() if e.kind == kind)

    async def save(self, entry: Entry) -> Entry:
        """Save or update an entry."""
        self._entries[entry.id] = entry
        return entry
