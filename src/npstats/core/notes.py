"""Pure note and calendar-entry parsing - no I/O dependencies."""

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import PurePath

from .classifier import (
    CALENDAR_PROFILE,
    NOTE_PROFILE,
    LineKind,
    TaskProfile,
    TemplateTracker,
    classify_line,
)
from .dates import is_future_date, parse_iso_date, to_ordinal, week_number

logger = logging.getLogger(__name__)

COMPLETED_RE = re.compile(r"@(?:completed|finished)\(([0-9\-./]{6,10})\)")


class Category(Enum):
    GOAL = "Goal"
    PROJECT = "Project"
    OTHER = "Other"


# Checked in order; first marker present wins
CATEGORY_MARKERS = (
    ("#goal", Category.GOAL),
    ("#project", Category.PROJECT),
)
CANCELLED_MARKERS = ("#cancelled", "#someday")
ARCHIVE_MARKER = "#archive"


@dataclass
class TaskCounts:
    """Task counters plus the dates on which tasks were completed."""

    done: int = 0
    overdue: int = 0
    undated: int = 0
    waiting: int = 0
    future: int = 0
    done_dates: Counter = field(default_factory=Counter)

    def add(self, kind: LineKind, on: date | None = None) -> None:
        match kind:
            case LineKind.DONE:
                self.done += 1
                if on is not None:
                    self.done_dates[to_ordinal(on)] += 1
            case LineKind.OVERDUE:
                self.overdue += 1
            case LineKind.UNDATED:
                self.undated += 1
            case LineKind.WAITING:
                self.waiting += 1
            case LineKind.FUTURE:
                self.future += 1

    def __iadd__(self, other: "TaskCounts") -> "TaskCounts":
        self.done += other.done
        self.overdue += other.overdue
        self.undated += other.undated
        self.waiting += other.waiting
        self.future += other.future
        self.done_dates.update(other.done_dates)
        return self


def count_tasks(lines: list[str], today: date, profile: TaskProfile) -> TaskCounts:
    """Run every line through the classifier, carrying template state across the file."""
    counts = TaskCounts()
    tracker = TemplateTracker()
    for line in lines:
        result = classify_line(line, tracker, today, profile)
        counts.add(result.kind, result.on)
    return counts


@dataclass(frozen=True)
class NoteRecord:
    """A parsed project/goal/other note."""

    filename: str
    title: str
    metadata_line: str = ""
    category: Category = Category.OTHER
    is_active: bool = True
    is_cancelled: bool = False
    is_completed: bool = False
    completed_date: date | None = None
    counts: TaskCounts = field(default_factory=TaskCounts)

    @property
    def done(self) -> int:
        return self.counts.done

    @property
    def overdue(self) -> int:
        return self.counts.overdue

    @property
    def undated(self) -> int:
        return self.counts.undated

    @property
    def waiting(self) -> int:
        return self.counts.waiting

    @property
    def future(self) -> int:
        return self.counts.future

    @property
    def done_dates(self) -> Counter:
        return self.counts.done_dates


def parse_category(metadata_line: str) -> Category:
    for marker, category in CATEGORY_MARKERS:
        if marker in metadata_line:
            return category
    return Category.OTHER


def parse_note(filename: str, text: str, today: date | None = None) -> NoteRecord:
    """
    Parse a note's text.

    Line 1 is the title and line 2 the metadata line; markers there decide
    category and status. The remaining lines are counted as tasks.
    """
    today = today or date.today()
    lines = text.splitlines()
    title = lines[0].lstrip("#").strip() if lines else ""
    if len(lines) < 2:
        return NoteRecord(filename=filename, title=title)

    metadata_line = lines[1]
    completed = COMPLETED_RE.search(metadata_line)
    is_cancelled = any(m in metadata_line for m in CANCELLED_MARKERS)
    is_archived = ARCHIVE_MARKER in metadata_line
    is_active = not (is_archived or is_cancelled or completed is not None)

    logger.debug(f"Parsing note {filename}")
    return NoteRecord(
        filename=filename,
        title=title,
        metadata_line=metadata_line,
        category=parse_category(metadata_line),
        is_active=is_active,
        is_cancelled=is_cancelled,
        is_completed=completed is not None,
        completed_date=parse_iso_date(completed.group(1)) if completed else None,
        counts=count_tasks(lines[2:], today, NOTE_PROFILE),
    )


# ============== Calendar entries ==============


def _daily_start(m: re.Match) -> date:
    return date(int(m["year"]), int(m["month"]), int(m["day"]))


def _weekly_start(m: re.Match) -> date:
    return date.fromisocalendar(int(m["year"]), int(m["week"]), 1)


def _monthly_start(m: re.Match) -> date:
    return date(int(m["year"]), int(m["month"]), 1)


def _quarterly_start(m: re.Match) -> date:
    return date(int(m["year"]), 3 * int(m["quarter"]) - 2, 1)


def _yearly_start(m: re.Match) -> date:
    return date(int(m["year"]), 1, 1)


class PeriodKind(Enum):
    """Calendar note period, each with its filename pattern and start-date rule."""

    DAILY = (r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})", _daily_start)
    WEEKLY = (r"(?P<year>\d{4})-W(?P<week>\d{2})", _weekly_start)
    MONTHLY = (r"(?P<year>\d{4})-(?P<month>\d{2})", _monthly_start)
    QUARTERLY = (r"(?P<year>\d{4})-Q(?P<quarter>[1-4])", _quarterly_start)
    YEARLY = (r"(?P<year>\d{4})", _yearly_start)

    def __init__(self, pattern: str, start):
        self.regex = re.compile(pattern + r"\.(?:md|txt)$")
        self.start = start

    def start_date(self, stem_match: re.Match) -> date:
        return self.start(stem_match)


def detect_period(filename: str) -> tuple[PeriodKind, date] | None:
    """Work out the period kind and start date from a calendar filename."""
    name = PurePath(filename).name
    for kind in PeriodKind:
        match = kind.regex.fullmatch(name)
        if not match:
            continue
        try:
            return kind, kind.start_date(match)
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class CalendarEntry:
    """A parsed daily/weekly/monthly/quarterly/yearly calendar note."""

    filename: str
    period: PeriodKind
    start_date: date
    is_future: bool
    raw_text: str
    counts: TaskCounts = field(default_factory=TaskCounts)

    @property
    def week_number(self) -> int:
        return week_number(self.start_date)

    @property
    def done(self) -> int:
        return self.counts.done

    @property
    def done_dates(self) -> Counter:
        return self.counts.done_dates


def parse_calendar_entry(
    filename: str, text: str, today: date | None = None
) -> CalendarEntry | None:
    """
    Parse a calendar note. Returns None if the filename carries no date.

    Future-ness comes purely from the date embedded in the filename.
    """
    today = today or date.today()
    detected = detect_period(filename)
    if detected is None:
        logger.debug(f"Ignoring calendar file without a date: {filename}")
        return None
    period, start = detected
    return CalendarEntry(
        filename=filename,
        period=period,
        start_date=start,
        is_future=is_future_date(start, today),
        raw_text=text,
        counts=count_tasks(text.splitlines(), today, CALENDAR_PROFILE),
    )
