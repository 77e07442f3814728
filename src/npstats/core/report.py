"""Pure output row builders for CSV files and screen summaries."""

from datetime import date

from .aggregate import CorpusTotals, DoneDateTable
from .dates import week_commencing
from .notes import Category
from .tag_stats import TagStatsReport

TIMESTAMP_FORMAT = "%d %b %Y %H:%M"
DONE_DATES_HEADER = ["Date", "Goals", "Projects", "Others"]
SUMMARY_HEADER = ["", "Notes", "Done", "Overdue", "Undated", "Waiting", "Future"]
SUMMARY_LABELS = {
    Category.GOAL: "Goals",
    Category.PROJECT: "Project",
    Category.OTHER: "Other",
}


def task_stats_row(timestamp: str, totals: CorpusTotals) -> list:
    """One task_stats.csv record: timestamp, note counts, then G/P/O/Total counters."""
    row: list = [timestamp, totals.active_notes, totals.inactive_notes]
    for category in Category:
        row.extend(totals.row(category))
    row.extend(totals.row())
    return row


def task_summary_table(totals: CorpusTotals) -> list[list]:
    """Screen table: header, one row per category, TOTAL last."""
    table: list[list] = [SUMMARY_HEADER]
    for category in Category:
        table.append([SUMMARY_LABELS[category], totals.notes[category], *totals.row(category)])
    table.append(["TOTAL", totals.total_notes, *totals.row()])
    return table


def done_dates_rows(table: DoneDateTable, today: date) -> list[list]:
    rows: list[list] = [DONE_DATES_HEADER]
    for row in table.exportable(today):
        rows.append([row.date.isoformat(), row.goals, row.projects, row.others])
    return rows


def format_week_commencing(d: date) -> str:
    return f"{d.day}.{d.month}.{d.year}"


def tag_stats_rows(
    report: TagStatsReport, timestamp: str, year: int, first_seen: bool = False
) -> list[list[str]]:
    """
    Rows for <year>_tag_stats.csv.

    Tag counts first, then one block per mention that was seen at least once,
    then the weekly table of mention sums. With first_seen the tag rows gain
    a "First seen" column for the screen.
    """
    rows: list[list[str]] = [["Tag", "Past", "Future", "First seen" if first_seen else timestamp]]
    for t in report.tags:
        row = [t.tag, str(t.past), str(t.future)]
        if first_seen:
            row.append(t.first_seen.isoformat() if t.first_seen else "")
        rows.append(row)
    rows.append(["Days found", str(report.past_days), str(report.future_days)])

    for m in report.mentions:
        if not m.count:
            continue
        values = m.sorted_values()
        rows.append([])
        rows.append([f"{m.mention} mentions for {year}"])
        rows.append(["Value", *(str(v) for v, _ in values)])
        rows.append(["Count", *(str(n) for _, n in values)])
        rows.append(["Total", str(m.total)])
        rows.append(["Avg", str(m.average)])

    if report.mentions:
        rows.append([])
        rows.append(["Week#", "W/C", *(m.mention for m in report.mentions)])
        for week in report.active_weeks():
            rows.append(
                [
                    str(week),
                    format_week_commencing(week_commencing(year, week)),
                    *(str(m.weekly[week]) for m in report.mentions),
                ]
            )
        rows.append(["Total", "", *(str(sum(m.weekly)) for m in report.mentions)])
    return rows
