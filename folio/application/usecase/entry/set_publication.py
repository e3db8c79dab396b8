"""Publish now / unpublish use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from folio.domain.error import NotFoundError
from folio.domain.service import EntryService, VisibilityService
from folio.domain.value import ContentKind, EntryId

from .common import EntryResponse, to_entry_response


class SetPublicationRequest(BaseModel):
    """Set publication request."""

    entry_id: str
    kind: ContentKind
    publish: bool  # True: publish now, False: revert to draft


class SetPublicationUseCase:
    """Use case for the admin publish-now and unpublish actions."""

    def __init__(
        self, entry_service: EntryService, visibility_service: VisibilityService
    ) -> None:
        """Initialize set publication use case.

        Args:
            entry_service: Entry domain service
            visibility_service: Visibility domain service
        """
        self.entry_service = entry_service
        self.visibility_service = visibility_service

    async def execute(self, request: SetPublicationRequest) -> EntryResponse:
        """Execute set publication flow.

        Publishing stamps ``published_at`` with the current instant, even when
        the entry was scheduled for later. Unpublishing clears it.

        Args:
            request: Set publication request

        Returns:
            Updated entry

        Raises:
            NotFoundError: If the entry does not exist within the kind
        """
        entry_id = EntryId(UUID(request.entry_id))

        with logfire.span(
            "set_publication.execute",
            entry_id=str(entry_id),
            kind=request.kind.value,
            publish=request.publish,
        ):
            entry = await self.entry_service.get_entry_by_id(entry_id)
            if entry is None or entry.kind != request.kind:
                raise NotFoundError("Entry", str(entry_id))

            now = self.visibility_service.now()
            updated = entry.model_copy(
                update={
                    "published_at": now if request.publish else None,
                    "updated_at": now,
                }
            )
            saved = await self.entry_service.save_entry(updated)
            status = self.visibility_service.status(saved)

            logfire.info(
                "Entry publication changed", entry_id=str(entry_id), status=status.value
            )
            return to_entry_response(saved, status)
