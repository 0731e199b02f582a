"""Unit tests for stored document mappers."""

from datetime import datetime, timezone

import pytest

from joinlink.domain.error import StoreTransportError
from joinlink.domain.model import InvitationRecord
from joinlink.persistence.mappers import document_to_record, record_to_document


class TestRecordToDocument:
    """Tests for record_to_document."""

    def test_uses_camel_case_and_zulu_time(self):
        record = InvitationRecord(
            url="https://join.slack.com/t/x",
            created_at=datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            is_active=True,
        )

        assert record_to_document(record) == {
            "url": "https://join.slack.com/t/x",
            "createdAt": "2025-01-02T03:04:05Z",
            "isActive": True,
        }

    def test_document_reads_back_to_same_record(self):
        record = InvitationRecord(
            url="https://join.slack.com/t/x",
            created_at=datetime(2025, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc),
            is_active=False,
        )

        assert document_to_record(record_to_document(record)) == record


class TestDocumentToRecord:
    """Tests for document_to_record."""

    def test_reads_javascript_iso_string(self):
        record = document_to_record(
            {
                "url": "https://join.slack.com/t/x",
                "createdAt": "2025-01-02T03:04:05.123Z",
                "isActive": True,
            }
        )

        assert record.created_at == datetime(
            2025, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc
        )
        assert record.is_active is True

    def test_non_object_raises_transport_error(self):
        with pytest.raises(StoreTransportError):
            document_to_record(["not", "a", "record"])

    def test_malformed_field_raises_transport_error(self):
        with pytest.raises(StoreTransportError):
            document_to_record({"url": "x", "createdAt": "yesterday", "isActive": True})
