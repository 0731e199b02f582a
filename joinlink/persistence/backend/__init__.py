"""Storage backends for the invitation record."""

from .edge_config import (
    EdgeConfigApiReader,
    EdgeConfigApiWriter,
    EdgeConfigConnection,
    EdgeConfigEdgeReader,
    parse_connection_string,
)
from .file import FileRecordReader, FileRecordWriter

__all__ = [
    "EdgeConfigApiReader",
    "EdgeConfigApiWriter",
    "EdgeConfigConnection",
    "EdgeConfigEdgeReader",
    "FileRecordReader",
    "FileRecordWriter",
    "parse_connection_string",
]
