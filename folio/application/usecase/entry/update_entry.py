"""Update entry use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.error import NotFoundError
from folio.domain.service import EntryService, VisibilityService
from folio.domain.value import ContentKind, EntryId, Slug

from .common import EntryResponse, media_or_none, to_entry_response


class UpdateEntryRequest(BaseModel):
    """Update entry request.

    A full replacement of the editable fields, as submitted by the editor.
    """

    entry_id: str
    kind: ContentKind
    title: str
    slug: str
    description: str | None = None
    content: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    tags: str | None = None
    published_at: str | None = None


class UpdateEntryUseCase(BaseUseCase):
    """Use case for editing an existing entry."""

    def __init__(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> None:
        """Initialize update entry use case.

        Args:
            entry_service: Entry domain service
            visibility_service: Visibility domain service
        """
        self.entry_service = entry_service
        self.visibility_service = visibility_service

    async def execute(self, request: UpdateEntryRequest) -> EntryResponse:
        """Execute update entry flow.

        The submitted publish date goes through the same resolution as on
        creation, so re-saving a live entry with its past date re-stamps it
        with the current time.

        Args:
            request: Update entry request

        Returns:
            Updated entry

        Raises:
            NotFoundError: If the entry does not exist within the kind
            InvalidTimestamp: If the publish date cannot be parsed
            SlugConflictError: If the new slug is taken within the kind
        """
        entry_id = EntryId(UUID(request.entry_id))

        with logfire.span(
            "update_entry.execute", entry_id=str(entry_id), kind=request.kind.value
        ):
            entry = await self.entry_service.get_entry_by_id(entry_id)
            if entry is None or entry.kind != request.kind:
                raise NotFoundError("Entry", str(entry_id))

            slug = Slug(request.slug)
            if slug != entry.slug:
                logfire.info(
                    "Entry slug changed",
                    entry_id=str(entry_id),
                    old_slug=str(entry.slug),
                    new_slug=str(slug),
                )
                await self.entry_service.ensure_slug_available(
                    request.kind, slug, exclude_id=entry_id
                )

            published_at = self.visibility_service.resolve_publish_timestamp(
                request.published_at
            )

            updated = entry.model_copy(
                update={
                    "title": request.title,
                    "slug": slug,
                    "description": request.description,
                    "content": request.content,
                    "image_url": media_or_none(request.image_url),
                    "video_url": media_or_none(request.video_url),
                    "tags": request.tags,
                    "published_at": published_at,
                    "updated_at": self.visibility_service.now(),
                }
            )

            saved = await self.entry_service.save_entry(updated)
            return to_entry_response(saved, self.visibility_service.status(saved))
