"""Admin dashboard use case."""

from pydantic import BaseModel

from folio.domain.service import EntryService


class DashboardResponse(BaseModel):
    """Number of entries of each kind, drafts included."""

    articles: int
    research: int
    projects: int
    websites: int


class GetDashboardUseCase:
    """Use case for the admin dashboard counts."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self) -> DashboardResponse:
        counts = await self.entry_service.count_by_kind()
        return DashboardResponse(
            **{kind.section.value: count for kind, count in counts.items()}
        )
