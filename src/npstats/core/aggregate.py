"""Corpus-level task aggregation - no I/O dependencies."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from .dates import from_ordinal
from .notes import CalendarEntry, Category, NoteRecord, TaskCounts

COUNTER_NAMES = ("done", "overdue", "undated", "waiting", "future")


@dataclass
class CorpusTotals:
    """
    Task counters per category.

    Grand totals are always derived from the three categories.
    """

    notes: dict[Category, int] = field(default_factory=lambda: {c: 0 for c in Category})
    counts: dict[Category, TaskCounts] = field(
        default_factory=lambda: {c: TaskCounts() for c in Category}
    )
    active_notes: int = 0
    inactive_notes: int = 0

    def value(self, category: Category, counter: str) -> int:
        return getattr(self.counts[category], counter)

    def total(self, counter: str) -> int:
        return sum(self.value(c, counter) for c in Category)

    @property
    def total_notes(self) -> int:
        return sum(self.notes.values())

    def row(self, category: Category | None = None) -> list[int]:
        """Counters in export order for one category, or grand totals when None."""
        if category is None:
            return [self.total(name) for name in COUNTER_NAMES]
        return [self.value(category, name) for name in COUNTER_NAMES]


@dataclass(frozen=True)
class DoneDateRow:
    ordinal: str
    goals: int = 0
    projects: int = 0
    others: int = 0

    @property
    def date(self) -> date:
        return from_ordinal(self.ordinal)

    @property
    def total(self) -> int:
        return self.goals + self.projects + self.others


@dataclass
class DoneDateTable:
    """Completions per date, one row per distinct date, sorted ascending."""

    rows: list[DoneDateRow] = field(default_factory=list)

    @classmethod
    def from_counters(cls, goals: Counter, projects: Counter, others: Counter) -> "DoneDateTable":
        keys = set(goals) | set(projects) | set(others)
        return cls(
            [
                DoneDateRow(k, goals.get(k, 0), projects.get(k, 0), others.get(k, 0))
                for k in sorted(keys)
            ]
        )

    def merge(self, other: "DoneDateTable") -> "DoneDateTable":
        """Key-wise sum of two tables."""
        merged: dict[str, list[int]] = {}
        for row in [*self.rows, *other.rows]:
            cols = merged.setdefault(row.ordinal, [0, 0, 0])
            cols[0] += row.goals
            cols[1] += row.projects
            cols[2] += row.others
        return DoneDateTable([DoneDateRow(k, *merged[k]) for k in sorted(merged)])

    def compact(self) -> "DoneDateTable":
        """Merge rows sharing a date."""
        return self.merge(DoneDateTable())

    def exportable(self, today: date) -> list[DoneDateRow]:
        """Rows strictly before today; today and the future are partial."""
        return [r for r in self.rows if r.date < today]


def aggregate_notes(
    notes: Iterable[NoteRecord],
    entries: Iterable[CalendarEntry] = (),
) -> tuple[CorpusTotals, DoneDateTable]:
    """
    Sum active notes into per-category totals and a done-date table.

    Calendar entries have no category and are added to Other.
    Pure function - no I/O.
    """
    totals = CorpusTotals()

    for note in notes:
        if not note.is_active or note.is_cancelled:
            totals.inactive_notes += 1
            continue
        totals.active_notes += 1
        totals.notes[note.category] += 1
        totals.counts[note.category] += note.counts

    for entry in entries:
        totals.counts[Category.OTHER] += entry.counts

    table = DoneDateTable.from_counters(
        totals.counts[Category.GOAL].done_dates,
        totals.counts[Category.PROJECT].done_dates,
        totals.counts[Category.OTHER].done_dates,
    )
    return totals, table
