"""File-based note source adapter."""

import logging
import os
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ("md", "txt")


class FileNoteSource:
    """
    Reads notes from a NotePlan-style directory tree.

    Implements NoteSource protocol. Project notes live under Notes/ and
    calendar notes under Calendar/. Ignored folders are pruned, and empty or
    unreadable files are skipped.
    """

    def __init__(
        self,
        base_dir: Path | str,
        folders_to_ignore: list[str] | None = None,
        extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS,
    ):
        self.base_dir = Path(base_dir).expanduser()
        self.folders_to_ignore = set(folders_to_ignore or [])
        self.extensions = {e.lower().lstrip(".") for e in extensions}

    @property
    def notes_dir(self) -> Path:
        return self.base_dir / "Notes"

    @property
    def calendar_dir(self) -> Path:
        return self.base_dir / "Calendar"

    def iter_notes(self) -> Iterator[tuple[str, str]]:
        """Yield (path, text) for every non-empty note, in sorted order."""
        yield from self._walk(self.notes_dir, prune=lambda name: name in self.folders_to_ignore)

    def iter_calendar(self, prefix: str = "") -> Iterator[tuple[str, str]]:
        """Yield (filename, text) for calendar notes whose filename starts with prefix."""
        for path, text in self._walk(self.calendar_dir, prune=lambda name: name.startswith("@")):
            if Path(path).name.startswith(prefix):
                yield Path(path).name, text

    def _accepts(self, path: Path) -> bool:
        return path.suffix.lower().lstrip(".") in self.extensions

    def _walk(self, root: Path, prune) -> Iterator[tuple[str, str]]:
        if not root.is_dir():
            logger.warning(f"Directory not found: {root}")
            return

        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not prune(d))
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if not self._accepts(path):
                    continue
                text = self._read(path)
                if text is None:
                    continue
                yield str(path), text

    def _read(self, path: Path) -> str | None:
        try:
            if path.stat().st_size == 0:
                logger.debug(f"{path} is empty, so will ignore")
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable file {path}: {e}")
            return None
