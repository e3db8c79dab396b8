"""Entry repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from folio.domain.model.entry import Entry
from folio.domain.value import ContentKind, EntryId, Slug


class EntryRepository(ABC):
    """Repository for Entry aggregate.

    Defines the contract for entry persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, entry_id: EntryId) -> Optional[Entry]:
        """Find an entry by ID.

        Args:
            entry_id: The entry's unique identifier

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, kind: ContentKind, slug: Slug) -> Optional[Entry]:
        """Find an entry by slug within a content kind.

        Publication state is not checked here.

        Args:
            kind: Content kind
            slug: Entry slug

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(
        self,
        kind: ContentKind,
        slug: Slug,
        exclude_id: Optional[EntryId] = None,
    ) -> bool:
        """Check whether a slug is taken within a content kind.

        Args:
            kind: Content kind
            slug: Slug to check
            exclude_id: Entry to ignore (the one being edited)

        Returns:
            True if another entry uses the slug
        """
        pass

    @abstractmethod
    async def find_published(
        self,
        kind: ContentKind,
        published_before: datetime,
        tag: Optional[str] = None,
        case_sensitive: bool = False,
        exclude_id: Optional[EntryId] = None,
        limit: Optional[int] = None,
    ) -> List[Entry]:
        """Find entries with ``published_at <= published_before``.

        Drafts are never returned. Results are ordered newest
        ``published_at`` first.

        Args:
            kind: Content kind
            published_before: Inclusive upper bound on ``published_at``
            tag: Substring to match against the raw tag field
            case_sensitive: Whether the tag match is case-sensitive
            exclude_id: Entry to leave out of the results
            limit: Maximum number of entries to return

        Returns:
            List of matching entries
        """
        pass

    @abstractmethod
    async def find_all(self, kind: ContentKind) -> List[Entry]:
        """Find every entry of a kind, drafts included, newest created first.

        Args:
            kind: Content kind

        Returns:
            List of entries
        """
        pass

    @abstractmethod
    async def count(self, kind: ContentKind) -> int:
        """Count entries of a kind, drafts included.

        Args:
            kind: Content kind

        Returns:
            Number of entries
        """
        pass

    @abstractmethod
    async def save(self, entry: Entry) -> Entry:
        """Save an entry (create or update).

        Args:
            entry: The entry to save

        Returns:
            The saved entry
        """
        pass
