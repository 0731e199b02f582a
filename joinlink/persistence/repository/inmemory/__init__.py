"""In-memory repository implementations for testing."""

from .invitation import InMemoryInvitationStore

__all__ = [
    "InMemoryInvitationStore",
]
