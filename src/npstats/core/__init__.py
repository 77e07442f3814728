"""Functional core - pure business logic with no I/O."""

from .classifier import LineKind, TemplateTracker, classify_line, NOTE_PROFILE, CALENDAR_PROFILE
from .notes import Category, NoteRecord, CalendarEntry, PeriodKind, parse_note, parse_calendar_entry
from .tags import extract_hashtags, extract_mentions, mention_values
from .aggregate import CorpusTotals, DoneDateTable, aggregate_notes
from .tag_stats import TagCount, MentionHistogram, TagStatsReport, aggregate_tags

__all__ = [
    # Classification
    "LineKind",
    "TemplateTracker",
    "classify_line",
    "NOTE_PROFILE",
    "CALENDAR_PROFILE",
    # Notes
    "Category",
    "NoteRecord",
    "CalendarEntry",
    "PeriodKind",
    "parse_note",
    "parse_calendar_entry",
    # Tags
    "extract_hashtags",
    "extract_mentions",
    "mention_values",
    # Aggregation
    "CorpusTotals",
    "DoneDateTable",
    "aggregate_notes",
    "TagCount",
    "MentionHistogram",
    "TagStatsReport",
    "aggregate_tags",
]
