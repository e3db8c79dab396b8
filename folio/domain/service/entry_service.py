"""Entry domain service."""

import re
from datetime import datetime
from typing import Optional

import logfire

from folio.domain.error import SlugConflictError
from folio.domain.model.entry import Entry
from folio.domain.repository import EntryRepository
from folio.domain.value import ContentKind, EntryId, Slug

from .base import Service
from .tags import first_tag


class EntryService(Service):
    """Domain service for entry operations."""

    def __init__(self, entry_repository: EntryRepository) -> None:
        """Initialize entry service.

        Args:
            entry_repository: Entry repository
        """
        self.entry_repository = entry_repository

    async def save_entry(self, entry: Entry) -> Entry:
        """Save an entry.

        Args:
            entry: Entry to save

        Returns:
            Saved entry
        """
        with logfire.span(
            "entry_service.save_entry",
            entry_id=str(entry.id),
            kind=entry.kind.value,
            title=entry.title,
        ):
            saved = await self.entry_repository.save(entry)
            logfire.info("Entry saved", entry_id=str(saved.id), kind=saved.kind.value)
            return saved

    async def get_entry_by_id(self, entry_id: EntryId) -> Entry | None:
        """Get an entry by ID.

        Args:
            entry_id: Entry ID

        Returns:
            Entry if found, None otherwise
        """
        with logfire.span("entry_service.get_entry_by_id", entry_id=str(entry_id)):
            entry = await self.entry_repository.find_by_id(entry_id)

            if entry:
                logfire.info("Entry found", entry_id=str(entry_id), title=entry.title)
            else:
                logfire.warn("Entry not found", entry_id=str(entry_id))

            return entry

    async def get_entry_by_slug(self, kind: ContentKind, slug: Slug) -> Entry | None:
        """Get an entry by slug, regardless of publication state.

        Args:
            kind: Content kind
            slug: Entry slug

        Returns:
            Entry if found, None otherwise
        """
        with logfire.span(
            "entry_service.get_entry_by_slug", kind=kind.value, slug=str(slug)
        ):
            entry = await self.entry_repository.find_by_slug(kind, slug)

            if entry:
                logfire.info(
                    "Entry found by slug",
                    kind=kind.value,
                    slug=str(slug),
                    entry_id=str(entry.id),
                )
            else:
                logfire.warn("Entry not found by slug", kind=kind.value, slug=str(slug))

            return entry

    async def list_entries(self, kind: ContentKind) -> list[Entry]:
        """List every entry of a kind, drafts included."""
        with logfire.span("entry_service.list_entries", kind=kind.value):
            entries = await self.entry_repository.find_all(kind)
            logfire.info("Entries retrieved", kind=kind.value, count=len(entries))
            return entries

    async def list_published(
        self,
        kind: ContentKind,
        published_before: datetime,
        tag: Optional[str] = None,
    ) -> list[Entry]:
        """List entries published at or before ``published_before``.

        Args:
            kind: Content kind
            published_before: Inclusive upper bound (the listing cutoff)
            tag: Case-insensitive substring filter on the raw tag field

        Returns:
            Entries, newest ``published_at`` first
        """
        with logfire.span(
            "entry_service.list_published",
            kind=kind.value,
            published_before=published_before.isoformat(),
            tag=tag,
        ):
            entries = await self.entry_repository.find_published(
                kind, published_before, tag=tag or None
            )
            logfire.info(
                "Published entries retrieved", kind=kind.value, count=len(entries)
            )
            return entries

    async def find_related(
        self, entry: Entry, now: datetime, limit: int = 3
    ) -> list[Entry]:
        """Find live entries of the same kind sharing the entry's first tag.

        The first tag is matched case-sensitively as a substring of the other
        entries' raw tag fields.

        Args:
            entry: Entry to find relations for
            now: Current instant (strict visibility)
            limit: Maximum number of related entries

        Returns:
            Related entries, newest ``published_at`` first
        """
        tag = first_tag(entry.tags)
        if tag is None:
            return []

        with logfire.span(
            "entry_service.find_related", entry_id=str(entry.id), tag=tag
        ):
            related = await self.entry_repository.find_published(
                entry.kind,
                now,
                tag=tag,
                case_sensitive=True,
                exclude_id=entry.id,
                limit=limit,
            )
            logfire.info(
                "Related entries retrieved", entry_id=str(entry.id), count=len(related)
            )
            return related

    async def count_by_kind(self) -> dict[ContentKind, int]:
        """Count entries per content kind, drafts included."""
        with logfire.span("entry_service.count_by_kind"):
            counts = {
                kind: await self.entry_repository.count(kind) for kind in ContentKind
            }
            logfire.info(
                "Entry counts retrieved",
                **{kind.value: count for kind, count in counts.items()},
            )
            return counts

    async def ensure_slug_available(
        self,
        kind: ContentKind,
        slug: Slug,
        exclude_id: Optional[EntryId] = None,
    ) -> None:
        """Check that a slug is free within its kind.

        Args:
            kind: Content kind
            slug: Requested slug
            exclude_id: Entry being edited (its own slug does not conflict)

        Raises:
            SlugConflictError: If another entry of the kind uses the slug
        """
        if await self.entry_repository.slug_exists(kind, slug, exclude_id=exclude_id):
            logfire.warn("Slug already exists", kind=kind.value, slug=str(slug))
            raise SlugConflictError(kind.value, str(slug))

    async def generate_unique_slug(
        self, kind: ContentKind, title: str, entry_id: EntryId
    ) -> Slug:
        """Generate a unique slug from a title.

        Handles collisions by appending numeric suffixes.

        Args:
            kind: Content kind the slug must be unique within
            title: Entry title to slugify
            entry_id: Entry ID (used for fallback if title produces empty slug)

        Returns:
            Unique slug for the entry
        """
        with logfire.span(
            "entry_service.generate_unique_slug",
            entry_id=str(entry_id),
            kind=kind.value,
            title=title,
        ):
            base_slug_str = slugify(title)

            # Fallback for titles without any ASCII letters or digits
            if not base_slug_str:
                fallback = f"{kind.value}-{entry_id.hex[:8]}"
                logfire.info(
                    "Using fallback slug for empty title",
                    entry_id=str(entry_id),
                    slug=fallback,
                )
                return Slug(fallback)

            slug_str = base_slug_str
            counter = 1
            while await self.entry_repository.slug_exists(kind, Slug(slug_str)):
                suffix = f"-{counter}"
                slug_str = base_slug_str[: 100 - len(suffix)].rstrip("-") + suffix
                counter += 1
                logfire.debug(
                    "Slug collision, trying with suffix",
                    base_slug=base_slug_str,
                    attempt=slug_str,
                    counter=counter,
                )

            slug = Slug(slug_str)
            logfire.info(
                "Unique slug generated",
                entry_id=str(entry_id),
                slug=str(slug),
                had_collision=counter > 1,
            )
            return slug


def slugify(title: str) -> str:
    """Convert title to URL-safe slug format.

    - Converts to lowercase
    - Replaces non-alphanumeric chars with hyphens
    - Removes consecutive hyphens
    - Strips leading/trailing hyphens
    - Truncates to 100 characters

    Args:
        title: Title to slugify

    Returns:
        URL-safe slug string (may be empty if title has no valid chars)
    """
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
    slug = re.sub(r"-+", "-", slug)
    # Truncation can expose a trailing hyphen, so strip again afterwards
    return slug.strip("-")[:100].strip("-")
