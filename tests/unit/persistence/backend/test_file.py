"""Unit tests for the local file backend."""

import json

import pytest

from joinlink.domain.error import StoreTransportError
from joinlink.persistence.backend import FileRecordReader, FileRecordWriter
from tests.factories import VALID_URL, make_record


class TestFileRecordReader:
    """Tests for FileRecordReader."""

    @pytest.mark.asyncio
    async def test_missing_file_means_no_record(self, tmp_path):
        reader = FileRecordReader(tmp_path / "missing.json")

        assert await reader.read() is None

    @pytest.mark.asyncio
    async def test_reads_stored_document(self, tmp_path):
        path = tmp_path / "invite.json"
        path.write_text(
            json.dumps(
                {"url": VALID_URL, "createdAt": "2025-01-01T00:00:00.000Z", "isActive": True}
            )
        )

        record = await FileRecordReader(path).read()

        assert record is not None
        assert record.url == VALID_URL
        assert record.is_active is True

    @pytest.mark.asyncio
    async def test_invalid_json_is_transport_error(self, tmp_path):
        path = tmp_path / "invite.json"
        path.write_text("{not json")

        with pytest.raises(StoreTransportError):
            await FileRecordReader(path).read()


class TestFileRecordWriter:
    """Tests for FileRecordWriter."""

    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "data" / "nested" / "invite.json"
        record = make_record()

        await FileRecordWriter(path).write(record)

        document = json.loads(path.read_text())
        assert document["url"] == VALID_URL
        assert document["isActive"] is True
        assert document["createdAt"].endswith("Z")

    @pytest.mark.asyncio
    async def test_written_record_reads_back(self, tmp_path):
        path = tmp_path / "invite.json"
        record = make_record(age_days=3, is_active=False)

        await FileRecordWriter(path).write(record)

        assert await FileRecordReader(path).read() == record
