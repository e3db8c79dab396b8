"""Unit tests for ListPublishedUseCase."""

from datetime import timedelta

import pytest
from dishka import AsyncContainer

from folio.application.usecase.content import ListPublishedRequest, ListPublishedUseCase
from folio.domain.repository import EntryRepository
from folio.domain.value import ContentKind
from tests.conftest import make_entry
from tests.di import TEST_NOW
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPublishedUseCase:
    """Tests for the public section listing."""

    @pytest.mark.asyncio
    async def test_listing_window(self, unit_env: AsyncContainer):
        """Live entries and entries due within five minutes are listed."""
        # Arrange
        use_case = await unit_env.get(ListPublishedUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(
            make_entry(slug="live", published_at=TEST_NOW - timedelta(days=1))
        )
        await repository.save(
            make_entry(slug="soon", published_at=TEST_NOW + timedelta(minutes=3))
        )
        await repository.save(
            make_entry(slug="later", published_at=TEST_NOW + timedelta(minutes=6))
        )
        await repository.save(make_entry(slug="draft"))

        # Act
        response = await use_case.execute(ListPublishedRequest(kind=ContentKind.ARTICLE))

        # Assert
        assert [e.slug for e in response.entries] == ["soon", "live"]
        assert response.selected_tag is None

    @pytest.mark.asyncio
    async def test_only_requested_kind(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListPublishedUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(
            make_entry(slug="paper", kind=ContentKind.RESEARCH, published_at=TEST_NOW)
        )
        await repository.save(make_entry(slug="post", published_at=TEST_NOW))

        response = await use_case.execute(ListPublishedRequest(kind=ContentKind.RESEARCH))

        assert [e.slug for e in response.entries] == ["paper"]
        assert response.entries[0].kind == ContentKind.RESEARCH

    @pytest.mark.asyncio
    async def test_tag_filter_is_substring_and_case_insensitive(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        use_case = await unit_env.get(ListPublishedUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(
            make_entry(slug="art", tags="Art, design", published_at=TEST_NOW)
        )
        await repository.save(
            make_entry(
                slug="smart",
                tags="smart cities",
                published_at=TEST_NOW - timedelta(hours=1),
            )
        )
        await repository.save(make_entry(slug="physics", tags="physics", published_at=TEST_NOW))

        # Act
        response = await use_case.execute(
            ListPublishedRequest(kind=ContentKind.ARTICLE, tag="art")
        )

        # Assert
        assert [e.slug for e in response.entries] == ["art", "smart"]
        assert response.selected_tag == "art"

    @pytest.mark.asyncio
    async def test_all_tags_come_from_listed_entries(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListPublishedUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(
            make_entry(slug="one", tags="ml, ai", published_at=TEST_NOW)
        )
        await repository.save(
            make_entry(slug="two", tags="design, ai", published_at=TEST_NOW)
        )
        await repository.save(make_entry(slug="hidden", tags="secret"))

        response = await use_case.execute(ListPublishedRequest(kind=ContentKind.ARTICLE))
        filtered = await use_case.execute(
            ListPublishedRequest(kind=ContentKind.ARTICLE, tag="ml")
        )

        assert response.all_tags == ["ai", "design", "ml"]
        assert filtered.all_tags == ["ai", "ml"]

    @pytest.mark.asyncio
    async def test_entries_expose_parsed_tags(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListPublishedUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(make_entry(tags=" ml ,, ai, ml", published_at=TEST_NOW))

        response = await use_case.execute(ListPublishedRequest(kind=ContentKind.ARTICLE))

        assert response.entries[0].tags == ["ml", "ai"]

    @pytest.mark.asyncio
    async def test_empty_tag_is_no_filter(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListPublishedUseCase)
        repository = await unit_env.get(EntryRepository)
        await repository.save(make_entry(published_at=TEST_NOW))

        response = await use_case.execute(
            ListPublishedRequest(kind=ContentKind.ARTICLE, tag="")
        )

        assert len(response.entries) == 1
        assert response.selected_tag is None
