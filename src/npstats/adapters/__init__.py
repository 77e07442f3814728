"""Adapters - I/O implementations of ports."""

from .file_notes import FileNoteSource
from .csv_sink import CsvStatsSink

__all__ = [
    "FileNoteSource",
    "CsvStatsSink",
]
