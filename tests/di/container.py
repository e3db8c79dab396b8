"""Test container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from folio.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Container with test doubles for every mockable component.

    By default entries live in memory and time is frozen at ``TEST_NOW``.
    Components listed in ``unmock`` use their production implementation.

    Examples:
        build_test_container()                        # unit and API tests
        build_test_container(unmock={"persistence"})  # against PostgreSQL

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - _mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        mockable = bool(base.__subclasses__()) and component is not None
        use_mock = mockable and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())


def _mockable_components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and base.__mock_component__
    }
