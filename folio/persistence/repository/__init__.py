"""PostgreSQL repository implementations."""

from folio.persistence.repository.entry import PostgresEntryRepository

__all__ = [
    "PostgresEntryRepository",
]
