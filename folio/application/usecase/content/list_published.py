"""List published entries use case."""

import logfire
from pydantic import BaseModel

from folio.domain.service import EntryService, VisibilityService
from folio.domain.service.tags import collect_tags
from folio.domain.value import ContentKind

from .common import PublishedEntry, to_published_entry


class ListPublishedRequest(BaseModel):
    """List published entries request."""

    kind: ContentKind
    tag: str | None = None


class ListPublishedResponse(BaseModel):
    """List published entries response."""

    entries: list[PublishedEntry]
    all_tags: list[str]  # Tags of the listed entries, sorted
    selected_tag: str | None


class ListPublishedUseCase:
    """Use case for a public section listing."""

    def __init__(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> None:
        """Initialize list published use case.

        Args:
            entry_service: Entry domain service
            visibility_service: Visibility domain service
        """
        self.entry_service = entry_service
        self.visibility_service = visibility_service

    async def execute(self, request: ListPublishedRequest) -> ListPublishedResponse:
        """Execute list published flow.

        Listings use the tolerance window: entries scheduled up to a few
        minutes ahead are already listed, although their detail page only
        opens once they are live.

        Args:
            request: List published request

        Returns:
            Entries newest published first, with the tags they carry
        """
        cutoff = self.visibility_service.listing_cutoff()

        with logfire.span(
            "list_published.execute", kind=request.kind.value, tag=request.tag
        ):
            entries = await self.entry_service.list_published(
                request.kind, cutoff, tag=request.tag
            )
            return ListPublishedResponse(
                entries=[to_published_entry(entry) for entry in entries],
                all_tags=collect_tags(entry.tags for entry in entries),
                selected_tag=request.tag or None,
            )
