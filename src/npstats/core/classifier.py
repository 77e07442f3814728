"""Line-by-line task classification - no I/O dependencies."""

import logging
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from .dates import is_future_date, parse_iso_date

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^(#+)\s")
TASK_RE = re.compile(r"^\s*\*\s+")
DONE_DATE_RE = re.compile(r"@done\((\d{4}-\d{2}-\d{2})")
SCHEDULED_RE = re.compile(r"\s>(\d{4}-\d{2}-\d{2})")

DONE_MARKER = "[x]"
CANCELLED_MARKER = "[-]"
WAITING_MARKER = "#waiting"
TEMPLATE_MARKER = "#template"


class LineKind(Enum):
    HEADING = "heading"
    DONE = "done"
    OVERDUE = "overdue"
    UNDATED = "undated"
    FUTURE = "future"
    WAITING = "waiting"
    SUPPRESSED = "suppressed"
    NON_TASK = "non_task"


@dataclass(frozen=True)
class TaskProfile:
    """How a kind of file treats its lines."""

    name: str
    tracks_templates: bool


# Project/goal notes carry #template sections; calendar entries do not.
NOTE_PROFILE = TaskProfile(name="note", tracks_templates=True)
CALENDAR_PROFILE = TaskProfile(name="calendar", tracks_templates=False)


@dataclass(frozen=True)
class Classification:
    kind: LineKind
    on: date | None = None


class TemplateTracker:
    """
    Tracks whether the scan is inside a #template section.

    The only state is the heading level that opened the section (0 = none).
    A heading at the same or a higher level closes it.
    """

    def __init__(self):
        self.level = 0

    @property
    def suppressing(self) -> bool:
        return self.level > 0

    def heading(self, level: int, text: str) -> None:
        if self.level and level <= self.level:
            self.level = 0
        if TEMPLATE_MARKER in text:
            self.level = level


def heading_level(line: str) -> int:
    match = HEADING_RE.match(line)
    return len(match.group(1)) if match else 0


def classify_line(
    line: str,
    tracker: TemplateTracker,
    today: date,
    profile: TaskProfile = NOTE_PROFILE,
) -> Classification:
    """
    Classify one line of a note.

    First match wins: heading, completed task, open task, anything else.
    Completed tasks count even inside a template section.
    """
    level = heading_level(line)
    if level:
        if profile.tracks_templates:
            tracker.heading(level, line)
        return Classification(LineKind.HEADING)

    if not TASK_RE.match(line):
        return Classification(LineKind.NON_TASK)

    if DONE_MARKER in line:
        done_on = None
        match = DONE_DATE_RE.search(line)
        if match:
            done_on = parse_iso_date(match.group(1))
        if done_on is None:
            logger.debug(f"No @done(...) date found in '{line.rstrip()}'")
        return Classification(LineKind.DONE, done_on)

    if CANCELLED_MARKER in line:
        return Classification(LineKind.NON_TASK)

    if profile.tracks_templates and tracker.suppressing:
        return Classification(LineKind.SUPPRESSED)

    if WAITING_MARKER in line:
        return Classification(LineKind.WAITING)

    # The last scheduled marker on the line wins
    scheduled = None
    for match in SCHEDULED_RE.finditer(line):
        scheduled = parse_iso_date(match.group(1))
    if scheduled is None:
        return Classification(LineKind.UNDATED)
    if is_future_date(scheduled, today):
        return Classification(LineKind.FUTURE, scheduled)
    return Classification(LineKind.OVERDUE, scheduled)
