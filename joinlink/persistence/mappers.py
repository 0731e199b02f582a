"""Mappers between stored JSON documents and domain models.

Stored form (also what the JavaScript admin tooling writes):

    {"url": "...", "createdAt": "2025-01-01T00:00:00.000Z", "isActive": true}
"""

from datetime import timezone
from typing import Any, Dict

from pydantic import ValidationError

from joinlink.domain.error import StoreTransportError
from joinlink.domain.model import InvitationRecord


def document_to_record(document: Any) -> InvitationRecord:
    """Convert a stored JSON document to an InvitationRecord.

    Args:
        document: Decoded JSON value

    Returns:
        InvitationRecord domain model

    Raises:
        StoreTransportError: If the document is not a valid record
    """
    if not isinstance(document, dict):
        raise StoreTransportError(
            f"Stored invitation record is not an object: {type(document).__name__}"
        )
    try:
        return InvitationRecord.model_validate(document)
    except ValidationError as e:
        raise StoreTransportError(f"Stored invitation record is malformed: {e}")


def record_to_document(record: InvitationRecord) -> Dict[str, Any]:
    """Convert an InvitationRecord to its stored JSON document.

    Args:
        record: InvitationRecord domain model

    Returns:
        JSON-serializable dict with camelCase keys
    """
    created_at = record.created_at.astimezone(timezone.utc).isoformat()
    return {
        "url": record.url,
        "createdAt": created_at.replace("+00:00", "Z"),
        "isActive": record.is_active,
    }
