"""Get published entry use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from folio.config import PublishingSettings
from folio.domain.service import EntryService, VisibilityService
from folio.domain.value import ContentKind, Slug

from .common import PublishedEntry, PublishedEntryDetail, to_published_entry


class GetPublishedRequest(BaseModel):
    """Get published entry request."""

    kind: ContentKind
    slug: str


class GetPublishedResponse(BaseModel):
    """Get published entry response."""

    entry: PublishedEntryDetail
    related: list[PublishedEntry]


class GetPublishedUseCase:
    """Use case for a public detail page."""

    def __init__(
        self,
        entry_service: EntryService,
        visibility_service: VisibilityService,
        settings: PublishingSettings,
    ) -> None:
        """Initialize get published use case.

        Args:
            entry_service: Entry domain service
            visibility_service: Visibility domain service
            settings: Publishing settings
        """
        self.entry_service = entry_service
        self.visibility_service = visibility_service
        self.settings = settings

    async def execute(
        self, request: GetPublishedRequest
    ) -> Optional[GetPublishedResponse]:
        """Execute get published flow.

        Args:
            request: Get published request

        Returns:
            Entry with related entries if live, None if missing, draft or
            scheduled
        """
        with logfire.span(
            "get_published.execute", kind=request.kind.value, slug=request.slug
        ):
            try:
                slug = Slug(request.slug)
            except ValueError:
                # Malformed slugs can't match any entry
                return None

            entry = await self.entry_service.get_entry_by_slug(request.kind, slug)
            if entry is None or not self.visibility_service.is_visible(entry):
                return None

            related = await self.entry_service.find_related(
                entry, self.visibility_service.now(), limit=self.settings.related_limit
            )

            summary = to_published_entry(entry)
            return GetPublishedResponse(
                entry=PublishedEntryDetail(**summary.model_dump(), content=entry.content),
                related=[to_published_entry(r) for r in related],
            )
