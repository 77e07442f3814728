"""Shared workflow layer between the CLI and the functional core.

Each run_* function: reads notes through a NoteSource, aggregates with the
pure core, writes tables through a StatsSink, and returns a result object
for display.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from .adapters.csv_sink import CsvStatsSink
from .adapters.file_notes import FileNoteSource
from .config import Config, load_tag_settings
from .core.aggregate import CorpusTotals, DoneDateTable, aggregate_notes
from .core.notes import PeriodKind, parse_calendar_entry, parse_note
from .core.report import (
    TIMESTAMP_FORMAT,
    done_dates_rows,
    tag_stats_rows,
    task_stats_row,
)
from .core.tag_stats import TagStatsReport, aggregate_tags
from .ports import NoteSource, StatsSink

logger = logging.getLogger(__name__)

TASK_STATS_TABLE = "task_stats"
DONE_DATES_TABLE = "task_done_dates"


def get_source(config: Config) -> FileNoteSource:
    """Resolve the note source from config."""
    return FileNoteSource(
        config.base_dir,
        folders_to_ignore=config.folders_to_ignore,
        extensions=config.file_extensions,
    )


def get_sink(config: Config) -> CsvStatsSink:
    """Resolve the output directory from config."""
    return CsvStatsSink(config.summaries_dir)


@dataclass
class TaskStatsResult:
    timestamp: str
    totals: CorpusTotals
    done_dates: DoneDateTable
    calendar_entries: int = 0
    written: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class TagStatsResult:
    timestamp: str
    year: int
    period: str
    report: TagStatsReport
    rows: list[list[str]]
    entries: int = 0
    written: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _missing_dir_warnings(source: NoteSource, notes: bool = True, calendar: bool = True) -> list[str]:
    warnings = []
    dirs = []
    if notes:
        dirs.append(source.notes_dir)
    if calendar:
        dirs.append(source.calendar_dir)
    for d in dirs:
        if not d.is_dir():
            warnings.append(f"Warning: directory {d} not found; counting nothing from it")
    return warnings


def _calendar_prefix(year: int | None, month: int | None = None) -> str:
    if year is None:
        return ""
    if month is None:
        return f"{year:04d}"
    return f"{year:04d}{month:02d}"


def run_task_stats(
    config: Config,
    year: int | None = None,
    include_calendar: bool = True,
    write_files: bool = True,
    now: datetime | None = None,
    source: NoteSource | None = None,
    sink: StatsSink | None = None,
) -> TaskStatsResult:
    """
    Count tasks across notes (and calendar entries for year), and write
    task_stats.csv and task_done_dates.csv unless write_files is False.
    """
    now = now or datetime.now()
    today = now.date()
    source = source or get_source(config)
    warnings = _missing_dir_warnings(source, calendar=include_calendar)

    notes = [parse_note(name, text, today) for name, text in source.iter_notes()]

    entries = []
    if include_calendar:
        for name, text in source.iter_calendar(_calendar_prefix(year)):
            entry = parse_calendar_entry(name, text, today)
            if entry is not None:
                entries.append(entry)

    totals, table = aggregate_notes(notes, entries)
    if not totals.active_notes:
        warnings.append("Warning: No matching active note files found.")
    if include_calendar and not entries:
        warnings.append("Warning: No matching calendar files found.")

    result = TaskStatsResult(
        timestamp=now.strftime(TIMESTAMP_FORMAT),
        totals=totals,
        done_dates=table,
        calendar_entries=len(entries),
        warnings=warnings,
    )

    if write_files:
        sink = sink or get_sink(config)
        try:
            sink.append_row(TASK_STATS_TABLE, task_stats_row(result.timestamp, totals))
            result.written.append(TASK_STATS_TABLE)
            sink.write_rows(DONE_DATES_TABLE, done_dates_rows(table, today))
            result.written.append(DONE_DATES_TABLE)
        except OSError as e:
            logger.error(f"Failed writing task stats: {e}")
            result.warnings.append(f"ERROR: {e} when writing task stats")

    return result


def run_tag_stats(
    config: Config,
    year: int | None = None,
    month: int | None = None,
    write_files: bool = True,
    now: datetime | None = None,
    source: NoteSource | None = None,
    sink: StatsSink | None = None,
) -> TagStatsResult:
    """
    Count configured hashtags and @mentions across daily calendar notes for
    a year (or year+month), and write <year>_tag_stats.csv unless write_files
    is False.

    Raises ConfigError if the tag settings file cannot be loaded.
    """
    now = now or datetime.now()
    today = now.date()
    year = year or today.year
    settings = load_tag_settings(config.tag_settings_path)
    source = source or get_source(config)
    warnings = _missing_dir_warnings(source, notes=False)

    entries = []
    for name, text in source.iter_calendar(_calendar_prefix(year, month)):
        entry = parse_calendar_entry(name, text, today)
        if entry is not None and entry.period is PeriodKind.DAILY:
            entries.append(entry)
    if not entries:
        warnings.append("Warning: No matching files found.")

    report = aggregate_tags(entries, settings.tags_to_count, settings.mentions_to_count)
    timestamp = now.strftime(TIMESTAMP_FORMAT)
    period = f"{year}" if month is None else f"{year}-{month:02d}"
    result = TagStatsResult(
        timestamp=timestamp,
        year=year,
        period=period,
        report=report,
        rows=tag_stats_rows(report, timestamp, year),
        entries=len(entries),
        warnings=warnings,
    )

    if write_files:
        sink = sink or get_sink(config)
        name = f"{period}_tag_stats"
        try:
            sink.write_rows(name, result.rows)
            result.written.append(name)
        except OSError as e:
            logger.error(f"Failed writing tag stats: {e}")
            result.warnings.append(f"ERROR: {e} when writing tag stats")

    return result
