"""Store implementations."""

from .invitation import ChainedInvitationStore, RecordReader, RecordWriter

__all__ = [
    "ChainedInvitationStore",
    "RecordReader",
    "RecordWriter",
]
