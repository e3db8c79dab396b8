"""Get entry use case (admin)."""

from uuid import UUID

from pydantic import BaseModel

from folio.domain.error import NotFoundError
from folio.domain.service import EntryService, VisibilityService
from folio.domain.value import ContentKind, EntryId

from .common import EntryResponse, to_entry_response


class GetEntryRequest(BaseModel):
    """Get entry request."""

    entry_id: str
    kind: ContentKind


class GetEntryUseCase:
    """Use case for loading any entry by ID, regardless of publication state."""

    def __init__(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> None:
        self.entry_service = entry_service
        self.visibility_service = visibility_service

    async def execute(self, request: GetEntryRequest) -> EntryResponse:
        """Execute get entry flow.

        Raises:
            NotFoundError: If the entry does not exist within the kind
        """
        entry_id = EntryId(UUID(request.entry_id))
        entry = await self.entry_service.get_entry_by_id(entry_id)
        if entry is None or entry.kind != request.kind:
            raise NotFoundError("Entry", str(entry_id))

        return to_entry_response(entry, self.visibility_service.status(entry))
