"""Domain value objects for Folio."""

from folio.domain.value.identifiers import EntryId
from folio.domain.value.types import (
    ContentKind,
    ContentSection,
    PublicationStatus,
    Slug,
)

__all__ = [
    # Identifiers
    "EntryId",
    # Types
    "ContentKind",
    "ContentSection",
    "PublicationStatus",
    "Slug",
]
