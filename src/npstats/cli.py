"""npstats CLI - NotePlan task and tag statistics."""

import logging
import sys
from datetime import date

import click

from .config import ConfigError, load_config
from .core.report import tag_stats_rows, task_summary_table
from .workflows import run_tag_stats, run_task_stats

TOTAL_COLOUR = "bright_yellow"
WARNING_COLOUR = "bright_red"


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _warn(message: str) -> None:
    click.secho(message, fg=WARNING_COLOUR, err=True)


def _show_table(table: list[list], highlight: set[int]) -> None:
    """Print rows as aligned columns, colouring the highlighted row indexes."""
    widths = [max(len(str(row[i])) for row in table if i < len(row)) for i in range(max(map(len, table)))]
    for n, row in enumerate(table):
        line = "".join(str(cell).ljust(widths[i] + 2) for i, cell in enumerate(row)).rstrip()
        if n in highlight:
            click.secho(line, fg=TOTAL_COLOUR)
        else:
            click.echo(line)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="npstats")
def main():
    """npstats - task and tag statistics for NotePlan notes."""
    pass


@main.command()
@click.argument("year", type=int, required=False)
@click.option("--verbose", "-v", is_flag=True, help="Show information as I work")
@click.option("--nofile", "-n", "no_file", is_flag=True, help="Do not write summary to file")
@click.option("--nocal", "-c", "no_calendar", is_flag=True, help="Do not count calendar notes")
def tasks(year: int | None, verbose: bool, no_file: bool, no_calendar: bool):
    """Summarise open, done, waiting and future tasks."""
    _setup_logging(verbose)
    config = load_config()
    year = year or date.today().year

    click.echo(f"Counting tasks in {config.base_dir} (calendar notes for {year})")
    result = run_task_stats(
        config,
        year=year,
        include_calendar=not no_calendar,
        write_files=not no_file,
    )

    for warning in result.warnings:
        _warn(warning)

    totals = result.totals
    click.echo(f"From {totals.active_notes} active notes and {result.calendar_entries} calendar notes:")
    table = task_summary_table(totals)
    _show_table(table, highlight={0, len(table) - 1})

    for name in result.written:
        click.echo(f"Written {name}.csv to {config.summaries_dir}")


@main.command()
@click.argument("year", type=int, required=False)
@click.argument("month", type=click.IntRange(1, 12), required=False)
@click.option("--verbose", "-v", is_flag=True, help="Show information as I work")
@click.option("--nofile", "-n", "no_file", is_flag=True, help="Do not write summary to file")
def tags(year: int | None, month: int | None, verbose: bool, no_file: bool):
    """Count configured #tags and @mention(n) values in calendar notes."""
    _setup_logging(verbose)
    config = load_config()

    try:
        result = run_tag_stats(config, year=year, month=month, write_files=not no_file)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for warning in result.warnings:
        _warn(warning)

    click.secho(f"Tag stats at {result.timestamp} for {result.period}", fg=TOTAL_COLOUR)
    for row in tag_stats_rows(result.report, result.timestamp, result.year, first_seen=True):
        if row and row[0] in ("Tag", "Week#", "Total", "Days found"):
            click.secho("\t".join(row), fg=TOTAL_COLOUR)
        else:
            click.echo("\t".join(row))

    for name in result.written:
        click.echo(f"Written {name}.csv to {config.summaries_dir}")


if __name__ == "__main__":
    main()
