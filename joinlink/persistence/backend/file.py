"""Local JSON file backend."""

import json
from pathlib import Path

import logfire

from joinlink.domain.error import StoreTransportError, StoreWriteError
from joinlink.domain.model import InvitationRecord
from joinlink.persistence.mappers import document_to_record, record_to_document
from joinlink.persistence.repository.invitation import RecordReader, RecordWriter


class FileRecordReader(RecordReader):
    """Reads the record from a JSON file. A missing file means no record."""

    name = "file"

    def __init__(self, path: Path) -> None:
        self.path = path

    async def read(self) -> InvitationRecord | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreTransportError(f"Cannot read {self.path}: {e}")

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise StoreTransportError(f"Invalid JSON in {self.path}: {e}")
        return document_to_record(document)


class FileRecordWriter(RecordWriter):
    """Writes the record to a JSON file, creating parent directories."""

    def __init__(self, path: Path) -> None:
        self.path = path

    async def write(self, record: InvitationRecord) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(record_to_document(record), indent=2), encoding="utf-8"
            )
        except OSError as e:
            logfire.error("Invitation file write failed", path=str(self.path), error=str(e))
            raise StoreWriteError(f"Cannot write {self.path}: {e}")
