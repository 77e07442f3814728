"""Ports - interfaces/protocols for external dependencies."""

from .note_source import NoteSource
from .stats_sink import StatsSink

__all__ = [
    "NoteSource",
    "StatsSink",
]
