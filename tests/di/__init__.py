"""Mock providers for testing."""

from .clock import TEST_NOW, MockClockProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockPersistenceProvider",
    "TEST_NOW",
    "build_test_container",
]
