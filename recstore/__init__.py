"""recstore: a named in-memory record store with a CLI and a JSON API."""
from .store import InvalidLabelError, ListFilter, Record, RecordCounts, RecordStore

__version__ = "0.1.0"

__all__ = ["InvalidLabelError", "ListFilter", "Record", "RecordCounts", "RecordStore"]
