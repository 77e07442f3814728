"""Note source interface."""

from pathlib import Path
from typing import Iterator, Protocol


class NoteSource(Protocol):
    """Interface for enumerating note files from any backend."""

    @property
    def notes_dir(self) -> Path:
        """Root of the project/topic notes."""
        ...

    @property
    def calendar_dir(self) -> Path:
        """Root of the calendar notes."""
        ...

    def iter_notes(self) -> Iterator[tuple[str, str]]:
        """Yield (identifier, text) for every non-empty project/topic note."""
        ...

    def iter_calendar(self, prefix: str = "") -> Iterator[tuple[str, str]]:
        """Yield (filename, text) for non-empty calendar notes whose name starts with prefix."""
        ...
