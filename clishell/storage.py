"""Places to keep command history between sessions."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Union

__all__ = ["HistoryStorage", "VolatileHistoryStorage", "FileHistoryStorage"]

DEFAULT_MAX_SIZE = 1000


class HistoryStorage(ABC):
    """Storage for commands, oldest first."""

    @abstractmethod
    def store(self, commands: Iterable[str]) -> None:
        """Append ``commands`` to the storage."""

    @abstractmethod
    def commands(self) -> list[str]:
        """Return all stored commands, oldest first."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored command."""


class VolatileHistoryStorage(HistoryStorage):
    """History kept in memory, holding at most ``max_size`` commands."""

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        self._commands: deque[str] = deque(maxlen=max_size)

    def store(self, commands: Iterable[str]) -> None:
        self._commands.extend(commands)

    def commands(self) -> list[str]:
        return list(self._commands)

    def clear(self) -> None:
        self._commands.clear()


class FileHistoryStorage(HistoryStorage):
    """History kept in a text file, one command per line."""

    def __init__(
        self, path: Union[str, os.PathLike], max_size: int = DEFAULT_MAX_SIZE
    ) -> None:
        self._path = os.fspath(path)
        self._max_size = max_size

    def store(self, commands: Iterable[str]) -> None:
        stored = self.commands()
        stored.extend(commands)
        if len(stored) > self._max_size:
            stored = stored[len(stored) - self._max_size:]
        with open(self._path, "w", encoding="utf-8", newline="") as f:
            f.writelines(f"{line}\n" for line in stored)

    def commands(self) -> list[str]:
        try:
            with open(self._path, encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError:
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def clear(self) -> None:
        with open(self._path, "w", encoding="utf-8"):
            pass