"""Application logging to the standard streams and, optionally, to a file."""

from __future__ import annotations

import inspect
import os
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path

__all__ = ["LogLevel", "Logger"]


class LogLevel(IntEnum):
    """Levels of log messages."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


class Logger:
    """Logs messages at or above a minimum level, with the caller's location."""

    def __init__(self, path: str | os.PathLike[str] | None = None, minimum: LogLevel = LogLevel.DEBUG) -> None:
        self._lock = threading.Lock()
        self._minimum = LogLevel(minimum)
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path | None:
        """The log file, or None if messages only go to the standard streams."""
        return self._path

    @property
    def minimum(self) -> LogLevel:
        """The lowest level that is logged."""
        return self._minimum

    def log(self, level: LogLevel, message: str) -> None:
        """Log ``message`` at ``level`` if it meets the minimum level."""
        level = LogLevel(level)
        if level < self._minimum:
            return
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            location = f"{Path(caller.f_code.co_filename).name}:{caller.f_lineno} {caller.f_code.co_name}"
        else:
            location = "<unknown>"
        del frame, caller
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] [{level.name.capitalize()}] {location}: {message}"
        stream = sys.stderr if level >= LogLevel.ERROR else sys.stdout
        with self._lock:
            print(line, file=stream, flush=True)
            if self._path is not None:
                with self._path.open("a", encoding="utf-8") as handle:
                    handle.write(line + "\n")