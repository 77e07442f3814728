"""Pure date rules - no I/O dependencies."""

import re
from datetime import date, datetime, timedelta

ISO_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def to_ordinal(d: date) -> str:
    """Format as YYYYDDD (year + zero-padded day of year)."""
    return d.strftime("%Y%j")


def from_ordinal(ordinal: str) -> date:
    """Inverse of to_ordinal."""
    return datetime.strptime(ordinal, "%Y%j").date()


def is_future_date(candidate: date, today: date) -> bool:
    return candidate > today


def week_number(d: date) -> int:
    """
    Week of year in [0, 53].

    Week 1 starts on the year's first Monday; days before it are week 0.
    """
    return int(d.strftime("%W"))


def week_commencing(year: int, week: int) -> date:
    """Monday of the given week_number() week."""
    jan1 = date(year, 1, 1)
    first_monday = jan1 + timedelta(days=(7 - jan1.weekday()) % 7)
    return first_monday + timedelta(weeks=week - 1)


def parse_iso_date(text: str) -> date | None:
    """Parse a leading YYYY-MM-DD. Returns None if malformed."""
    match = ISO_DATE_RE.match(text.strip())
    if not match:
        return None
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None
