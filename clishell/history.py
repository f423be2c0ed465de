"""Command-line history with browsing, in the style of a shell's arrow keys."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto
from typing import Iterable, TextIO

__all__ = ["History"]


class _Mode(Enum):
    INSERTING = auto()
    BROWSING = auto()


class History:
    """A bounded history of commands, newest first, that can be browsed.

    While browsing, the line being edited is kept as the newest entry so the
    user can come back to it.
    """

    def __init__(self, max_size: int) -> None:
        self._max_size = max_size
        self._buffer: deque[str] = deque()
        self._current = 0
        self._commands = 0
        self._mode = _Mode.INSERTING

    def _insert(self, item: str) -> None:
        self._buffer.appendleft(item)
        if len(self._buffer) > self._max_size:
            self._buffer.pop()

    def new_command(self, item: str) -> None:
        """Record an issued command and stop browsing.

        While browsing, the command replaces the edit line; a command equal to
        the previous one is not stored twice.
        """
        self._commands += 1
        self._current = 0
        if self._mode is _Mode.BROWSING:
            if len(self._buffer) > 1 and self._buffer[1] == item:
                self._buffer.popleft()
            else:
                self._buffer[self._current] = item
        elif not self._buffer or self._buffer[0] != item:
            self._insert(item)
        self._mode = _Mode.INSERTING

    def previous(self, line: str) -> str:
        """Move one entry back in the history and return it.

        ``line`` is the current content of the edit line, which is saved in
        place of the entry being left.
        """
        if self._mode is _Mode.INSERTING:
            self._insert(line)
            self._mode = _Mode.BROWSING
            self._current = 1 if len(self._buffer) > 1 else 0
        else:
            self._buffer[self._current] = line
            if self._current != len(self._buffer) - 1:
                self._current += 1
        return self._buffer[self._current]

    def next(self) -> str:
        """Move one entry forward in the history and return it, or ''."""
        if not self._buffer or self._current == 0:
            return ""
        self._current -= 1
        return self._buffer[self._current]

    def show(self, out: TextIO) -> None:
        """Write the whole history, newest first, to ``out``."""
        out.write("\n")
        for item in self._buffer:
            out.write(f"{item}\n")
        out.write("\n")
        out.flush()

    def load_commands(self, commands: Iterable[str]) -> None:
        """Load stored commands, oldest first."""
        for command in commands:
            self._insert(command)

    def get_commands(self) -> list[str]:
        """Return the commands issued in this session, oldest first."""
        entries = list(self._buffer)
        if self._mode is _Mode.BROWSING:
            entries = entries[1:]
        count = min(self._commands, len(entries))
        return entries[:count][::-1]