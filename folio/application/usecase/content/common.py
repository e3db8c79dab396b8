"""Public entry models."""

from datetime import datetime

from pydantic import BaseModel

from folio.domain.model import Entry
from folio.domain.service.tags import parse_tags
from folio.domain.value import ContentKind


class PublishedEntry(BaseModel):
    """Public view of a live entry."""

    kind: ContentKind
    title: str
    slug: str
    description: str | None
    image_url: str | None
    video_url: str | None
    tags: list[str]
    published_at: datetime


class PublishedEntryDetail(PublishedEntry):
    """Public view of a live entry with its body."""

    content: str | None


def to_published_entry(entry: Entry) -> PublishedEntry:
    return PublishedEntry(
        kind=entry.kind,
        title=entry.title,
        slug=str(entry.slug),
        description=entry.description,
        image_url=entry.image_url,
        video_url=entry.video_url,
        tags=parse_tags(entry.tags),
        published_at=entry.published_at,
    )
