"""Provider metadata shared by production and test wiring."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable test double
Component = Literal["persistence", "clock"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    A component base (e.g. ``PersistenceProvider``) names itself through
    ``__mock_component__``; its subclasses set ``__is_mock__`` to tell the
    production implementation from the test one.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
