"""Unit tests for the admin read use cases: get, list and dashboard."""

from datetime import timedelta

import pytest
from dishka import AsyncContainer

from folio.application.usecase.entry import (
    GetDashboardUseCase,
    GetEntryRequest,
    GetEntryUseCase,
    ListEntriesRequest,
    ListEntriesUseCase,
)
from folio.domain.error import NotFoundError
from folio.domain.repository import EntryRepository
from folio.domain.value import ContentKind, PublicationStatus
from tests.conftest import make_entry
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetEntryUseCase:
    @pytest.mark.asyncio
    async def test_returns_draft(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetEntryUseCase)
        repository = await unit_env.get(EntryRepository)
        entry = await repository.save(make_entry(title="Draft"))

        response = await use_case.execute(
            GetEntryRequest(entry_id=str(entry.id), kind=ContentKind.ARTICLE)
        )

        assert response.title == "Draft"
        assert response.status == PublicationStatus.DRAFT

    @pytest.mark.asyncio
    async def test_wrong_kind_is_not_found(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetEntryUseCase)
        repository = await unit_env.get(EntryRepository)
        entry = await repository.save(make_entry(kind=ContentKind.RESEARCH))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetEntryRequest(entry_id=str(entry.id), kind=ContentKind.ARTICLE)
            )


class TestListEntriesUseCase:
    @pytest.mark.asyncio
    async def test_lists_every_state_newest_created_first(self, unit_env: AsyncContainer):
        # Arrange
        use_case = await unit_env.get(ListEntriesUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(
            make_entry(slug="draft", created_at=TEST_NOW - timedelta(days=3))
        )
        await repository.save(
            make_entry(
                slug="live",
                published_at=TEST_NOW - timedelta(days=1),
                created_at=TEST_NOW - timedelta(days=2),
            )
        )
        await repository.save(
            make_entry(
                slug="scheduled",
                published_at=TEST_NOW + timedelta(days=1),
                created_at=TEST_NOW - timedelta(days=1),
            )
        )
        await repository.save(make_entry(slug="elsewhere", kind=ContentKind.WEBSITE))

        # Act
        response = await use_case.execute(ListEntriesRequest(kind=ContentKind.ARTICLE))

        # Assert
        assert response.total == 3
        assert [(e.slug, e.status) for e in response.entries] == [
            ("scheduled", PublicationStatus.SCHEDULED),
            ("live", PublicationStatus.LIVE),
            ("draft", PublicationStatus.DRAFT),
        ]


class TestGetDashboardUseCase:
    @pytest.mark.asyncio
    async def test_counts_per_section(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetDashboardUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(make_entry(kind=ContentKind.ARTICLE))
        await repository.save(make_entry(kind=ContentKind.PROJECT))
        await repository.save(make_entry(kind=ContentKind.PROJECT, published_at=TEST_NOW))

        response = await use_case.execute()

        assert response.model_dump() == {
            "articles": 1,
            "research": 0,
            "projects": 2,
            "websites": 0,
        }
