"""List entries use case (admin)."""

from pydantic import BaseModel

from folio.domain.service import EntryService, VisibilityService
from folio.domain.value import ContentKind

from .common import EntryResponse, to_entry_response


class ListEntriesRequest(BaseModel):
    """List entries request."""

    kind: ContentKind


class ListEntriesResponse(BaseModel):
    """List entries response."""

    entries: list[EntryResponse]
    total: int


class ListEntriesUseCase:
    """Use case for the admin list of a kind, drafts and scheduled included."""

    def __init__(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> None:
        self.entry_service = entry_service
        self.visibility_service = visibility_service

    async def execute(self, request: ListEntriesRequest) -> ListEntriesResponse:
        """Execute list entries flow.

        Args:
            request: List entries request

        Returns:
            Entries newest created first, each with its publication status
        """
        entries = await self.entry_service.list_entries(request.kind)
        return ListEntriesResponse(
            entries=[
                to_entry_response(entry, self.visibility_service.status(entry))
                for entry in entries
            ],
            total=len(entries),
        )
