"""Invitation record store interface."""

from abc import ABC, abstractmethod

import logfire

from joinlink.domain.error import RecordNotFoundError, StoreTransportError
from joinlink.domain.model.invitation import InvitationRecord


class InvitationStore(ABC):
    """Store for the singleton InvitationRecord.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.

    There are no transactions and no optimistic concurrency: the record is
    overwritten wholesale on every save and the last write wins.
    """

    @abstractmethod
    async def load(self) -> InvitationRecord:
        """Load the stored record.

        Returns:
            The stored invitation record

        Raises:
            RecordNotFoundError: If no record is stored
            StoreTransportError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def save(self, record: InvitationRecord) -> InvitationRecord:
        """Save the record, replacing whatever was stored.

        Args:
            record: The record to store

        Returns:
            The saved record

        Raises:
            StoreWriteError: If the backend rejects or cannot take the write
        """
        pass

    async def get(self) -> InvitationRecord:
        """Load the stored record, falling back to the empty record.

        Never raises. A missing record and an unreachable backend both
        yield InvitationRecord.empty().
        """
        try:
            return await self.load()
        except RecordNotFoundError:
            logfire.info("No invitation record stored, using empty record")
        except StoreTransportError as e:
            logfire.warn("Invitation record read failed, using empty record", error=str(e))
        return InvitationRecord.empty()
