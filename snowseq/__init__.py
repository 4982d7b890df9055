"""snowseq - SQL statement builder for sequence objects."""

from .builder import SequenceBuilder, sequence
from .config import ConfigError, resolve_connection_string
from .db import Database, SequenceRecord, fetch_sequence, list_sequences, scan_sequence
from .errors import DecodeError, ExecutionError, SequenceError
from .escaping import escape_string
from .report import generate_report

__all__ = [
    "SequenceBuilder",
    "sequence",
    "ConfigError",
    "resolve_connection_string",
    "Database",
    "SequenceRecord",
    "fetch_sequence",
    "list_sequences",
    "scan_sequence",
    "DecodeError",
    "ExecutionError",
    "SequenceError",
    "escape_string",
    "generate_report",
]
