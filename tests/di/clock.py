"""Mock clock providers for testing."""

from datetime import datetime, timezone

from dishka import Scope, alias, provide

from folio.util.clock import Clock, FixedClock
from folio.util.di.infrastructure.clock import ClockProvider

TEST_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class MockClockProvider(ClockProvider):
    """Mock clock provider with a manually driven clock.

    Tests resolve ``FixedClock`` to move time; services see it as ``Clock``.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_fixed_clock(self) -> FixedClock:
        """Provide fixed clock starting at TEST_NOW."""
        return FixedClock(TEST_NOW)

    clock = alias(source=FixedClock, provides=Clock)
