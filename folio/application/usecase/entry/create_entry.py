"""Create entry use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.model import Entry
from folio.domain.service import EntryService, VisibilityService
from folio.domain.value import ContentKind, EntryId, Slug

from .common import EntryResponse, media_or_none, to_entry_response


class CreateEntryRequest(BaseModel):
    """Create entry request."""

    kind: ContentKind
    title: str
    slug: str | None = None  # Generated from the title when omitted
    description: str | None = None
    content: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    tags: str | None = None
    published_at: str | None = None  # None/blank keeps the entry a draft


class CreateEntryUseCase(BaseUseCase):
    """Use case for creating a new entry."""

    def __init__(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> None:
        """Initialize create entry use case.

        Args:
            entry_service: Entry domain service
            visibility_service: Visibility domain service
        """
        self.entry_service = entry_service
        self.visibility_service = visibility_service

    async def execute(self, request: CreateEntryRequest) -> EntryResponse:
        """Execute create entry flow.

        Steps:
        1. Resolve the submitted publish date (draft, immediate or scheduled)
        2. Check the requested slug is free, or generate one from the title
        3. Create Entry (validation happens in domain model)
        4. Save entry (via EntryService)

        Args:
            request: Create entry request

        Returns:
            Created entry

        Raises:
            InvalidTimestamp: If the publish date cannot be parsed
            SlugConflictError: If the slug is taken within the kind
            ValueError: If the slug or title is malformed
        """
        with logfire.span(
            "create_entry.execute", kind=request.kind.value, title=request.title
        ):
            published_at = self.visibility_service.resolve_publish_timestamp(
                request.published_at
            )

            entry_id = EntryId(uuid4())
            if request.slug:
                slug = Slug(request.slug)
                await self.entry_service.ensure_slug_available(request.kind, slug)
            else:
                slug = await self.entry_service.generate_unique_slug(
                    request.kind, request.title, entry_id
                )

            now = self.visibility_service.now()
            entry = Entry(
                id=entry_id,
                kind=request.kind,
                title=request.title,
                slug=slug,
                description=request.description,
                content=request.content,
                image_url=media_or_none(request.image_url),
                video_url=media_or_none(request.video_url),
                tags=request.tags,
                published_at=published_at,
                created_at=now,
                updated_at=now,
            )

            saved = await self.entry_service.save_entry(entry)
            status = self.visibility_service.status(saved)

            logfire.info(
                "Entry created successfully",
                entry_id=str(saved.id),
                slug=str(saved.slug),
                status=status.value,
            )
            return to_entry_response(saved, status)
