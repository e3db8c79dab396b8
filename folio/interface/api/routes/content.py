"""Public content routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from folio.application.usecase.content import (
    GetPublishedRequest,
    GetPublishedResponse,
    GetPublishedUseCase,
    ListPublishedRequest,
    ListPublishedResponse,
    ListPublishedUseCase,
)
from folio.domain.value import ContentSection

router = APIRouter(tags=["content"], route_class=DishkaRoute)


@router.get("/{section}", response_model=ListPublishedResponse)
async def list_published(
    section: ContentSection,
    list_published_use_case: FromDishka[ListPublishedUseCase],
    tag: str | None = Query(default=None, max_length=100),
) -> ListPublishedResponse:
    """List published entries of a section, newest first.

    Args:
        section: Content section (articles, research, projects, websites)
        list_published_use_case: List published use case from DI
        tag: Optional tag filter (case-insensitive substring of the tag field)

    Returns:
        Entries and the tags they carry
    """
    return await list_published_use_case.execute(
        ListPublishedRequest(kind=section.kind, tag=tag)
    )


@router.get("/{section}/{slug}", response_model=GetPublishedResponse)
async def get_published(
    section: ContentSection,
    slug: str,
    get_published_use_case: FromDishka[GetPublishedUseCase],
) -> GetPublishedResponse:
    """Get a live entry and up to three related entries.

    Drafts and scheduled entries are reported as missing.

    Raises:
        HTTPException: 404 if the entry is missing or not live
    """
    result = await get_published_use_case.execute(
        GetPublishedRequest(kind=section.kind, slug=slug)
    )
    if result is None:
        logfire.info("Published entry not found", section=section.value, slug=slug)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Entry not found",
        )
    return result
