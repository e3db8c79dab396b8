"""PostgreSQL implementation of Entry repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Entry
from folio.domain.repository.entry import EntryRepository
from folio.domain.value import ContentKind, EntryId, Slug
from folio.persistence.mappers import entry_to_dict, row_to_entry
from folio.persistence.tables import entries_table


class PostgresEntryRepository(EntryRepository):
    """PostgreSQL implementation of EntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, entry_id: EntryId) -> Optional[Entry]:
        """Find an entry by ID."""
        with logfire.span("entry_repository.find_by_id", entry_id=str(entry_id)):
            stmt = select(entries_table).where(entries_table.c.id == entry_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None
            return row_to_entry(row._asdict())

    async def find_by_slug(self, kind: ContentKind, slug: Slug) -> Optional[Entry]:
        """Find an entry by slug within a kind."""
        with logfire.span(
            "entry_repository.find_by_slug", kind=kind.value, slug=str(slug)
        ):
            stmt = select(entries_table).where(
                entries_table.c.kind == kind.value,
                entries_table.c.slug == str(slug),
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None
            return row_to_entry(row._asdict())

    async def slug_exists(
        self,
        kind: ContentKind,
        slug: Slug,
        exclude_id: Optional[EntryId] = None,
    ) -> bool:
        """Check if a slug is taken within a kind."""
        with logfire.span(
            "entry_repository.slug_exists", kind=kind.value, slug=str(slug)
        ):
            stmt = (
                select(func.count())
                .select_from(entries_table)
                .where(
                    entries_table.c.kind == kind.value,
                    entries_table.c.slug == str(slug),
                )
            )
            if exclude_id is not None:
                stmt = stmt.where(entries_table.c.id != exclude_id)

            result = await self.session.execute(stmt)
            exists = (result.scalar() or 0) > 0

            logfire.debug("Slug existence check", slug=str(slug), exists=exists)
            return exists

    async def find_published(
        self,
        kind: ContentKind,
        published_before: datetime,
        tag: Optional[str] = None,
        case_sensitive: bool = False,
        exclude_id: Optional[EntryId] = None,
        limit: Optional[int] = None,
    ) -> List[Entry]:
        """Find entries published at or before the given instant."""
        with logfire.span(
            "entry_repository.find_published",
            kind=kind.value,
            published_before=published_before.isoformat(),
            tag=tag,
            case_sensitive=case_sensitive,
            limit=limit,
        ):
            stmt = select(entries_table).where(
                entries_table.c.kind == kind.value,
                entries_table.c.published_at.is_not(None),
                entries_table.c.published_at <= published_before,
            )

            # Substring match on the raw comma-separated field
            if tag:
                if case_sensitive:
                    stmt = stmt.where(entries_table.c.tags.contains(tag, autoescape=True))
                else:
                    stmt = stmt.where(
                        entries_table.c.tags.icontains(tag, autoescape=True)
                    )

            if exclude_id is not None:
                stmt = stmt.where(entries_table.c.id != exclude_id)

            stmt = stmt.order_by(desc(entries_table.c.published_at))
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            entries = [row_to_entry(row._asdict()) for row in result.fetchall()]

            logfire.info("Found published entries", kind=kind.value, count=len(entries))
            return entries

    async def find_all(self, kind: ContentKind) -> List[Entry]:
        """Find every entry of a kind, drafts included."""
        with logfire.span("entry_repository.find_all", kind=kind.value):
            stmt = (
                select(entries_table)
                .where(entries_table.c.kind == kind.value)
                .order_by(desc(entries_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            entries = [row_to_entry(row._asdict()) for row in result.fetchall()]

            logfire.info("Found entries", kind=kind.value, count=len(entries))
            return entries

    async def count(self, kind: ContentKind) -> int:
        """Count entries of a kind."""
        with logfire.span("entry_repository.count", kind=kind.value):
            stmt = (
                select(func.count())
                .select_from(entries_table)
                .where(entries_table.c.kind == kind.value)
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, entry: Entry) -> Entry:
        """Save an entry (create or update)."""
        with logfire.span(
            "entry_repository.save",
            entry_id=str(entry.id),
            kind=entry.kind.value,
            title=entry.title,
        ):
            existing = await self.find_by_id(entry.id)
            entry_dict = entry_to_dict(entry)

            if existing:
                logfire.info("Updating existing entry", entry_id=str(entry.id))
                stmt = (
                    entries_table.update()
                    .where(entries_table.c.id == entry.id)
                    .values(**entry_dict)
                )
            else:
                logfire.info(
                    "Inserting new entry",
                    entry_id=str(entry.id),
                    kind=entry.kind.value,
                    slug=str(entry.slug),
                )
                stmt = entries_table.insert().values(**entry_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Entry saved successfully", entry_id=str(entry.id))
            return entry
