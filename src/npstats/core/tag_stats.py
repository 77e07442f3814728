"""Hashtag and mention aggregation over calendar entries - no I/O dependencies."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .notes import CalendarEntry, PeriodKind
from .tags import count_tag, extract_hashtags, extract_mentions, mention_values

WEEKS_IN_YEAR = 54  # week_number() runs 0..53


@dataclass
class TagCount:
    tag: str
    past: int = 0
    future: int = 0
    first_seen: date | None = None


@dataclass
class MentionHistogram:
    """Frequency of each observed value of one @mention, plus weekly sums."""

    mention: str
    frequencies: Counter = field(default_factory=Counter)
    weekly: list[Decimal] = field(default_factory=lambda: [Decimal(0)] * WEEKS_IN_YEAR)

    def add(self, value: Decimal, week: int) -> None:
        self.frequencies[value] += 1
        self.weekly[week] += value

    @property
    def count(self) -> int:
        return sum(self.frequencies.values())

    @property
    def total(self) -> Decimal:
        return sum((v * n for v, n in self.frequencies.items()), Decimal(0))

    @property
    def average(self) -> int | None:
        """total/count rounded half-up to an integer; None when nothing was seen."""
        if not self.count:
            return None
        return int((self.total / self.count).quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def sorted_values(self) -> list[tuple[Decimal, int]]:
        return sorted(self.frequencies.items())


@dataclass
class TagStatsReport:
    tags: list[TagCount]
    mentions: list[MentionHistogram]
    past_days: int = 0
    future_days: int = 0

    def active_weeks(self) -> list[int]:
        """Week numbers with a non-zero total across any mention."""
        return [
            w
            for w in range(WEEKS_IN_YEAR)
            if any(m.weekly[w] for m in self.mentions)
        ]


def aggregate_tags(
    entries: Iterable[CalendarEntry],
    tags: list[str],
    mentions: list[str],
) -> TagStatsReport:
    """
    Count configured hashtags and @mention(n) values across daily calendar
    entries. Weekly, monthly, quarterly and yearly notes are skipped.

    Entries are processed in the given order, so first_seen is the first
    past entry in that order. Pure function - no I/O.
    """
    report = TagStatsReport(
        tags=[TagCount(t) for t in tags],
        mentions=[MentionHistogram(m) for m in mentions],
    )

    for entry in entries:
        if entry.period is not PeriodKind.DAILY:
            continue
        hashtags = extract_hashtags(entry.raw_text)
        matched = False
        for tag_count in report.tags:
            n = count_tag(hashtags, tag_count.tag)
            if not n:
                continue
            matched = True
            if entry.is_future:
                tag_count.future += n
            else:
                tag_count.past += n
                if tag_count.first_seen is None:
                    tag_count.first_seen = entry.start_date
        if matched:
            if entry.is_future:
                report.future_days += 1
            else:
                report.past_days += 1

        found = extract_mentions(entry.raw_text)
        for histogram in report.mentions:
            for value in mention_values(found, histogram.mention):
                histogram.add(value, entry.week_number)

    return report
