"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from folio.domain.model import Entry
from folio.domain.value import ContentKind, EntryId, Slug


def row_to_entry(row: Dict[str, Any]) -> Entry:
    """Convert database row to Entry domain model.

    Args:
        row: Database row as dict

    Returns:
        Entry domain model
    """
    return Entry(
        id=EntryId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        kind=ContentKind(row["kind"]),
        title=row["title"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        content=row.get("content"),
        image_url=row.get("image_url"),
        video_url=row.get("video_url"),
        tags=row.get("tags"),
        published_at=row.get("published_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    """Convert Entry domain model to database dict.

    Args:
        entry: Entry domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = entry.model_dump()
    data["kind"] = entry.kind.value
    data["slug"] = entry.slug.root
    return data
