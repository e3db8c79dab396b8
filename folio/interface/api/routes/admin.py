"""Admin entry management routes.

Every route requires the admin session cookie.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from folio.application.usecase.entry import (
    CreateEntryRequest,
    CreateEntryUseCase,
    DashboardResponse,
    EntryResponse,
    GetDashboardUseCase,
    GetEntryRequest,
    GetEntryUseCase,
    ListEntriesRequest,
    ListEntriesResponse,
    ListEntriesUseCase,
    SetPublicationRequest,
    SetPublicationUseCase,
    UpdateEntryRequest,
    UpdateEntryUseCase,
)
from folio.domain.service import AuthService
from folio.domain.value import ContentSection
from folio.interface.error import to_http_exception

from .auth import require_admin

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class EntryAPIRequest(BaseModel):
    """API request for creating or replacing an entry."""

    title: str = Field(min_length=1, max_length=300)
    slug: str | None = Field(default=None, max_length=100)
    description: str | None = None
    content: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    tags: str | None = None
    published_at: str | None = None  # ISO-8601, offset optional; null for draft


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    request: Request,
    auth_service: FromDishka[AuthService],
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
) -> DashboardResponse:
    """Entry counts per section, drafts included."""
    require_admin(request, auth_service)
    return await get_dashboard_use_case.execute()


@router.get("/{section}", response_model=ListEntriesResponse)
async def list_entries(
    section: ContentSection,
    request: Request,
    auth_service: FromDishka[AuthService],
    list_entries_use_case: FromDishka[ListEntriesUseCase],
) -> ListEntriesResponse:
    """List every entry of a section, newest created first.

    Args:
        section: Content section
        request: Incoming request
        auth_service: Admin authentication service from DI
        list_entries_use_case: List entries use case from DI

    Returns:
        Entries with their publication status
    """
    require_admin(request, auth_service)
    return await list_entries_use_case.execute(ListEntriesRequest(kind=section.kind))


@router.post(
    "/{section}", response_model=EntryResponse, status_code=status.HTTP_201_CREATED
)
async def create_entry(
    section: ContentSection,
    body: EntryAPIRequest,
    request: Request,
    auth_service: FromDishka[AuthService],
    create_entry_use_case: FromDishka[CreateEntryUseCase],
) -> EntryResponse:
    """Create an entry.

    A publish date in the past or within a minute of now publishes
    immediately; a later one schedules the entry; none keeps it a draft.

    Args:
        section: Content section
        body: Entry data
        request: Incoming request
        auth_service: Admin authentication service from DI
        create_entry_use_case: Create entry use case from DI

    Returns:
        Created entry

    Raises:
        HTTPException: 401 if not authenticated, 400 on a taken slug or an
            unparseable publish date
    """
    require_admin(request, auth_service)

    try:
        return await create_entry_use_case.execute(
            CreateEntryRequest(kind=section.kind, **body.model_dump())
        )
    except Exception as e:
        raise to_http_exception(e, "create entry")


@router.get("/{section}/{entry_id}", response_model=EntryResponse)
async def get_entry(
    section: ContentSection,
    entry_id: UUID,
    request: Request,
    auth_service: FromDishka[AuthService],
    get_entry_use_case: FromDishka[GetEntryUseCase],
) -> EntryResponse:
    """Load one entry for editing."""
    require_admin(request, auth_service)

    try:
        return await get_entry_use_case.execute(
            GetEntryRequest(entry_id=str(entry_id), kind=section.kind)
        )
    except Exception as e:
        raise to_http_exception(e, "load entry")


@router.put("/{section}/{entry_id}", response_model=EntryResponse)
async def update_entry(
    section: ContentSection,
    entry_id: UUID,
    body: EntryAPIRequest,
    request: Request,
    auth_service: FromDishka[AuthService],
    update_entry_use_case: FromDishka[UpdateEntryUseCase],
) -> EntryResponse:
    """Replace an entry's editable fields.

    Args:
        section: Content section
        entry_id: Entry UUID
        body: Entry data (slug required)
        request: Incoming request
        auth_service: Admin authentication service from DI
        update_entry_use_case: Update entry use case from DI

    Returns:
        Updated entry
    """
    require_admin(request, auth_service)

    if not body.slug:
        raise to_http_exception(ValueError("Slug is required"), "update entry")

    try:
        return await update_entry_use_case.execute(
            UpdateEntryRequest(
                entry_id=str(entry_id),
                kind=section.kind,
                **body.model_dump(),
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update entry")


@router.post("/{section}/{entry_id}/publish", response_model=EntryResponse)
async def publish_entry(
    section: ContentSection,
    entry_id: UUID,
    request: Request,
    auth_service: FromDishka[AuthService],
    set_publication_use_case: FromDishka[SetPublicationUseCase],
) -> EntryResponse:
    """Publish an entry now."""
    require_admin(request, auth_service)

    try:
        return await set_publication_use_case.execute(
            SetPublicationRequest(
                entry_id=str(entry_id), kind=section.kind, publish=True
            )
        )
    except Exception as e:
        raise to_http_exception(e, "publish entry")


@router.post("/{section}/{entry_id}/unpublish", response_model=EntryResponse)
async def unpublish_entry(
    section: ContentSection,
    entry_id: UUID,
    request: Request,
    auth_service: FromDishka[AuthService],
    set_publication_use_case: FromDishka[SetPublicationUseCase],
) -> EntryResponse:
    """Revert an entry to draft."""
    require_admin(request, auth_service)

    try:
        result = await set_publication_use_case.execute(
            SetPublicationRequest(
                entry_id=str(entry_id), kind=section.kind, publish=False
            )
        )
        logfire.info("Entry unpublished", entry_id=str(entry_id))
        return result
    except Exception as e:
        raise to_http_exception(e, "unpublish entry")
