"""Strongly typed identifiers for Folio domain entities.

Using NewType keeps entry IDs from being mixed up with other UUIDs.
"""

from typing import NewType
from uuid import UUID

EntryId = NewType("EntryId", UUID)
