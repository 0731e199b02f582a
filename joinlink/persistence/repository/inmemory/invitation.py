"""In-memory invitation store for testing."""

from joinlink.domain.error import (
    RecordNotFoundError,
    StoreTransportError,
    StoreWriteError,
)
from joinlink.domain.model import InvitationRecord
from joinlink.domain.repository.invitation import InvitationStore


class InMemoryInvitationStore(InvitationStore):
    """In-memory implementation of InvitationStore for testing."""

    def __init__(self, record: InvitationRecord | None = None) -> None:
        self._record = record
        self.writes: list[InvitationRecord] = []
        self.fail_reads = False
        self.fail_writes = False

    async def load(self) -> InvitationRecord:
        """Return the stored record."""
        if self.fail_reads:
            raise StoreTransportError("In-memory store is failing reads")
        if self._record is None:
            raise RecordNotFoundError("slack_invite")
        return self._record

    async def save(self, record: InvitationRecord) -> InvitationRecord:
        """Replace the stored record."""
        if self.fail_writes:
            raise StoreWriteError("In-memory store is failing writes")
        self._record = record
        self.writes.append(record)
        return record

    def seed(self, record: InvitationRecord) -> None:
        """Set the stored record without counting a write."""
        self._record = record
