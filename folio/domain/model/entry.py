"""Entry aggregate root.

Entries are the site's content: articles, research, projects and websites.
All four kinds share one structure and differ only in their ``kind``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import ContentKind, EntryId, Slug


class Entry(DomainModel):
    """Entry aggregate root.

    ``published_at`` drives visibility:
    - None: draft, never public
    - in the future: scheduled
    - at or before now: live
    """

    id: EntryId
    kind: ContentKind
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    description: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None  # Mutually exclusive with video_url in the editor
    video_url: Optional[str] = None
    tags: Optional[str] = None  # Raw comma-separated tag field
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
