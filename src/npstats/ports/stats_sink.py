"""Stats output interface."""

from typing import Protocol


class StatsSink(Protocol):
    """Interface for writing tabular results."""

    def append_row(self, name: str, row: list) -> None:
        """Append one record to the named table."""
        ...

    def write_rows(self, name: str, rows: list[list]) -> None:
        """Write/overwrite the named table."""
        ...
