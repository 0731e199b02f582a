"""Invitation store built from an ordered chain of read strategies."""

from abc import ABC, abstractmethod

import logfire

from joinlink.domain.error import RecordNotFoundError, StoreTransportError
from joinlink.domain.model import InvitationRecord
from joinlink.domain.repository import InvitationStore


class RecordReader(ABC):
    """One way of reading the stored record."""

    name: str = "reader"

    @abstractmethod
    async def read(self) -> InvitationRecord | None:
        """Read the record from this backend.

        Returns:
            The record, or None if this backend holds none

        Raises:
            StoreTransportError: If the backend cannot be read
        """
        pass


class RecordWriter(ABC):
    """Destination for record writes."""

    @abstractmethod
    async def write(self, record: InvitationRecord) -> None:
        """Overwrite the stored record.

        Raises:
            StoreWriteError: If the write fails
        """
        pass


class ChainedInvitationStore(InvitationStore):
    """InvitationStore trying its readers in order.

    The first reader that returns a record wins. Transport failures move on
    to the next reader. When no reader has the record the store raises
    RecordNotFoundError if every reader answered, or StoreTransportError if
    any reader could not be reached (absence is then unconfirmed).
    """

    def __init__(self, readers: list[RecordReader], writer: RecordWriter, key: str) -> None:
        """Initialize chained store.

        Args:
            readers: Read strategies, tried in order
            writer: Write destination
            key: Key the record is stored under (for errors and logs)
        """
        self.readers = readers
        self.writer = writer
        self.key = key

    async def load(self) -> InvitationRecord:
        """Load the record through the reader chain."""
        with logfire.span("invitation_store.load", key=self.key):
            last_error: StoreTransportError | None = None
            for reader in self.readers:
                try:
                    record = await reader.read()
                except StoreTransportError as e:
                    logfire.warn(
                        "Invitation read strategy failed",
                        reader=reader.name,
                        error=str(e),
                    )
                    last_error = e
                    continue

                if record is not None:
                    logfire.info("Invitation record loaded", reader=reader.name)
                    return record
                logfire.info("Invitation record not in backend", reader=reader.name)

            if last_error is not None:
                raise StoreTransportError(
                    f"No reader could load {self.key}: {last_error}"
                ) from last_error
            raise RecordNotFoundError(self.key)

    async def save(self, record: InvitationRecord) -> InvitationRecord:
        """Write the record through the writer."""
        with logfire.span("invitation_store.save", key=self.key, url=record.url):
            await self.writer.write(record)
            logfire.info(
                "Invitation record saved", url=record.url, is_active=record.is_active
            )
            return record
