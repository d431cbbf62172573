"""Mock providers for testing."""

from .live import MockLiveChannel, MockLiveProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockLiveChannel",
    "MockLiveProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
