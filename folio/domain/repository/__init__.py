"""Repository interfaces for the Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from folio.domain.repository.entry import EntryRepository

__all__ = [
    "EntryRepository",
]
