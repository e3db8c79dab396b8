"""Test harness for unit, integration and API tests.

Integration tests that unmock persistence assume PostgreSQL is reachable at
DATABASE__URL with migrations applied.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from folio.interface.api.app import create_app
from folio.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_entry(unit_env):
            use_case = await unit_env.get(CreateEntryUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for API test fixtures.

    The fixture yields ``(client, container)``: an httpx client talking to
    the app in-process, and the APP-scoped container behind it (for moving
    the fixed clock or reading settings).
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container=container)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client, container

        await container.close()

    return _api_environment
