"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

# Must be set before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")

import logfire  # noqa: E402

from folio.domain.model import Entry  # noqa: E402
from folio.domain.value import ContentKind, EntryId, Slug  # noqa: E402
from tests.di import TEST_NOW  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


def make_entry(
    title: str = "Test entry",
    slug: str | None = None,
    kind: ContentKind = ContentKind.ARTICLE,
    published_at: datetime | None = None,
    tags: str | None = None,
    created_at: datetime = TEST_NOW,
    **fields,
) -> Entry:
    """Helper to build an entry for tests.

    Args:
        title: Entry title
        slug: Slug (derived from a random suffix when omitted)
        kind: Content kind
        published_at: Publish timestamp (None for a draft)
        tags: Raw comma-separated tag field
        created_at: Creation timestamp
        **fields: Other Entry fields

    Returns:
        Entry domain model
    """
    entry_id = EntryId(uuid4())
    return Entry(
        id=entry_id,
        kind=kind,
        title=title,
        slug=Slug(slug or f"entry-{entry_id.hex[:8]}"),
        tags=tags,
        published_at=published_at,
        created_at=created_at,
        updated_at=created_at,
        **fields,
    )
