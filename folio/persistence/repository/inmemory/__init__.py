"""In-memory repository implementations for testing."""

from .entry import InMemoryEntryRepository

__all__ = [
    "InMemoryEntryRepository",
]
