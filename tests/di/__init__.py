"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .probe import MockProbeProvider
from .slack import MockSlackProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockProbeProvider",
    "MockSlackProvider",
    "build_test_container",
]
