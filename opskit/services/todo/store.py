"""
Flat-file todo store.

One task per line, UTF-8. An entry's identity is its 1-based position,
so removing entry N renumbers every entry after it.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


class TodoStore:
    """
    Reads and rewrites the todo file.

    Appends go straight to the file; removals and clears write a
    temporary file next to it and swap it in with os.replace.

    Not safe for concurrent writers: two processes mutating the store at
    once can lose an update.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> list[str]:
        """Return all entries in order. A missing file is an empty list."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [line for line in text.splitlines() if line.strip()]

    def append(self, entry: str) -> int:
        """
        Append one entry, creating the file if needed.

        Returns:
            1-based index of the new entry
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        needs_newline = self._missing_trailing_newline()
        with open(self.path, "a", encoding="utf-8") as f:
            if needs_newline:
                f.write("\n")
            f.write(entry + "\n")
        return len(self.read())

    def remove(self, index: int) -> str:
        """
        Remove the entry at a 1-based index.

        Raises:
            IndexError: If index does not name an entry (file untouched)
        """
        entries = self.read()
        if not 1 <= index <= len(entries):
            raise IndexError(index)
        removed = entries.pop(index - 1)
        self._write(entries)
        return removed

    def clear(self) -> None:
        """Empty the store, leaving an empty file in place."""
        if self.path.exists():
            self._write([])

    def _missing_trailing_newline(self) -> bool:
        try:
            with open(self.path, "rb") as f:
                f.seek(0, os.SEEK_END)
                if f.tell() == 0:
                    return False
                f.seek(-1, os.SEEK_END)
                return f.read(1) != b"\n"
        except FileNotFoundError:
            return False

    def _write(self, entries: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            mode: int | None = stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            mode = None

        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.writelines(entry + "\n" for entry in entries)
            # mkstemp creates 0600; keep the store's own permissions
            if mode is not None:
                os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
