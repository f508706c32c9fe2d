"""Timestamped application log kept in memory and appended to a text file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Callable, TextIO

DEFAULT_LOG_NAME = "Axis.log"
SEPARATOR = "*" * 79


class LogLevel(IntEnum):
    """Severity of a log entry."""

    STATUS = 0
    WARNING = 1
    ERROR = 2
    DEBUG = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def coerce(cls, value: int) -> "LogLevel":
        """Map any integer to a level; unknown values count as debug."""
        try:
            return cls(value)
        except ValueError:
            return cls.DEBUG


@dataclass(frozen=True)
class LogEntry:
    """One line of the log: time of day, severity label and message."""

    time: str
    kind: str
    message: str

    def format(self) -> str:
        return f"{self.time} ({self.kind}): {self.message}"


class AxisLog:
    """Collects log entries and appends each one to a text file.

    With ``path`` set to None nothing is written to disk. Listeners added to
    ``listeners`` are called with every new entry.
    """

    def __init__(self, path: str | os.PathLike[str] | None = DEFAULT_LOG_NAME):
        self.path = Path(path) if path is not None else None
        self.entries: list[LogEntry] = []
        self.listeners: list[Callable[[LogEntry], None]] = []
        self._file: TextIO | None = None

    def _open(self) -> TextIO | None:
        if self._file is None and self.path is not None:
            try:
                self._file = open(self.path, "a", encoding="utf-8")
            except OSError:
                self._file = None
        return self._file

    def add(self, level: int, message: str) -> LogEntry | None:
        """Record a message; returns the entry, or None if the file cannot be opened."""
        entry = LogEntry(
            time=datetime.now().strftime("%H:%M:%S"),
            kind=LogLevel.coerce(int(level)).label,
            message=message,
        )
        if self.path is not None:
            handle = self._open()
            if handle is None:
                return None
            handle.write(entry.format() + "\n")
            handle.flush()
        for listener in self.listeners:
            listener(entry)
        self.entries.append(entry)
        return entry

    def close(self) -> None:
        """Close the log file if it is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def clear(self) -> None:
        """Close the log file and delete it from disk."""
        self.close()
        if self.path is not None:
            try:
                self.path.unlink()
            except OSError:
                pass

    def __enter__(self) -> "AxisLog":
        return self

    def __exit__(self, *args) -> None:
        self.close()