"""CSV file output adapter."""

import csv
from pathlib import Path


class CsvStatsSink:
    """
    Writes tables as CSV files in an output directory.

    Implements StatsSink protocol. Table names map to <name>.csv.
    """

    def __init__(self, output_dir: Path | str):
        self.output_dir = Path(output_dir).expanduser()

    def path_for(self, name: str) -> Path:
        return self.output_dir / f"{name}.csv"

    def append_row(self, name: str, row: list) -> None:
        """Append one record, creating the file if needed."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with self.path_for(name).open("a", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow(row)

    def write_rows(self, name: str, rows: list[list]) -> None:
        """Write/overwrite the whole table."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with self.path_for(name).open("w", newline="", encoding="utf-8") as f:
            csv.writer(f).writerows(rows)
