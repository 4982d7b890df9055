"""Database access submodule for snowseq."""

from .database import Database
from .sequences import SequenceRecord, fetch_sequence, list_sequences, scan_sequence

__all__ = [
    "Database",
    "SequenceRecord",
    "fetch_sequence",
    "list_sequences",
    "scan_sequence",
]
