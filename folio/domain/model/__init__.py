"""Domain model entities for Folio."""

from folio.domain.model.entry import Entry

__all__ = [
    "Entry",
]
