"""Response models shared by the entry use cases."""

from datetime import datetime

from pydantic import BaseModel

from folio.domain.model import Entry
from folio.domain.service.tags import parse_tags
from folio.domain.value import ContentKind, PublicationStatus


class EntryResponse(BaseModel):
    """Admin view of an entry, drafts and scheduled entries included."""

    entry_id: str
    kind: ContentKind
    title: str
    slug: str
    description: str | None
    content: str | None
    image_url: str | None
    video_url: str | None
    tags: str | None  # Raw field, as edited
    tag_list: list[str]
    published_at: datetime | None
    status: PublicationStatus
    created_at: datetime
    updated_at: datetime


def to_entry_response(entry: Entry, status: PublicationStatus) -> EntryResponse:
    """Build the admin view of an entry."""
    return EntryResponse(
        entry_id=str(entry.id),
        kind=entry.kind,
        title=entry.title,
        slug=str(entry.slug),
        description=entry.description,
        content=entry.content,
        image_url=entry.image_url,
        video_url=entry.video_url,
        tags=entry.tags,
        tag_list=parse_tags(entry.tags),
        published_at=entry.published_at,
        status=status,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )


def media_or_none(value: str | None) -> str | None:
    """Store empty media references as null."""
    return value or None
