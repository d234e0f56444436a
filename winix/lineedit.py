"""A line reader with a de-duplicated, file-backed history."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

DEFAULT_HISTORY_FILE = ".history.txt"
PROMPT = ">> "
_NEWLINES = frozenset("\r\n")
_BACKSPACES = frozenset("\b\x7f")


class LineEditor:
    """Reads input lines and keeps a history saved to ``history_file``."""

    def __init__(self, history_file: str | os.PathLike[str] | None = DEFAULT_HISTORY_FILE) -> None:
        self.history_file = Path(history_file) if history_file is not None else None
        self.history: list[str] = []
        self._load_history()

    def _load_history(self) -> None:
        if self.history_file is None:
            return
        try:
            content = self.history_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return
        for line in content.splitlines():
            self._push(line)

    def _save_history(self) -> None:
        if self.history_file is None:
            return
        try:
            self.history_file.write_text(
                "".join(f"{entry}\n" for entry in self.history), encoding="utf-8"
            )
        except OSError:
            pass

    def _push(self, line: str) -> bool:
        if not line or (self.history and self.history[-1] == line):
            return False
        self.history.append(line)
        return True

    def read_line(self) -> str:
        """Prompt for and return one line; raises ``EOFError`` at end of input."""
        return input(PROMPT)

    def add_history_entry(self, line: str) -> None:
        """Record ``line`` unless it is empty or repeats the last entry, then save."""
        self._push(line)
        self._save_history()

    def feed_input(self, chars: Iterable[str]) -> str:
        """Build a line from typed characters, honouring backspace, up to a newline."""
        buffer: list[str] = []
        for ch in chars:
            if ch in _NEWLINES:
                break
            if ch in _BACKSPACES:
                if buffer:
                    buffer.pop()
            else:
                buffer.append(ch)
        return "".join(buffer)