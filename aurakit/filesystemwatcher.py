"""Watching a directory for changes to the files inside it."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

__all__ = [
    "FileAction",
    "WatcherFlags",
    "FileSystemChangedEventArgs",
    "FileSystemWatcher",
]


class FileAction(IntEnum):
    """Kinds of change to a watched file."""

    ADDED = 1
    REMOVED = 2
    MODIFIED = 3
    RENAMED = 4


class WatcherFlags(IntFlag):
    """Kinds of change a watcher reports."""

    FILE_NAME = 0x1
    DIRECTORY_NAME = 0x2
    ATTRIBUTES = 0x4
    SIZE = 0x8
    LAST_WRITE = 0x10
    LAST_ACCESS = 0x20
    ALL = FILE_NAME | DIRECTORY_NAME | ATTRIBUTES | SIZE | LAST_WRITE | LAST_ACCESS


@dataclass(frozen=True)
class FileSystemChangedEventArgs:
    """A change to a path under a watched directory."""

    path: Path
    why: FileAction


ChangedHandler = Callable[[FileSystemChangedEventArgs], None]


class _Dispatcher(FileSystemEventHandler):
    def __init__(self, watcher: FileSystemWatcher) -> None:
        super().__init__()
        self._watcher = watcher

    def on_any_event(self, event: FileSystemEvent) -> None:
        self._watcher._handle(event)


class FileSystemWatcher:
    """Reports changes under a directory to the handlers in ``changed``.

    Handlers are called from a background thread with a
    :class:`FileSystemChangedEventArgs`. Extension filters limit which files
    are reported; with no filters every file is reported.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        include_subdirectories: bool = False,
        watcher_flags: WatcherFlags = WatcherFlags.ALL,
    ) -> None:
        self._path = Path(path)
        if not self._path.is_dir():
            raise FileNotFoundError(f"not a directory: {self._path}")
        self._include_subdirectories = include_subdirectories
        self._watcher_flags = WatcherFlags(watcher_flags)
        self._lock = threading.Lock()
        self._extension_filters: list[str] = []
        self.changed: list[ChangedHandler] = []
        self._observer = Observer()
        self._observer.schedule(_Dispatcher(self), str(self._path), recursive=include_subdirectories)
        self._observer.daemon = True
        self._observer.start()
        self._watching = True

    @property
    def path(self) -> Path:
        """The watched directory."""
        return self._path

    @property
    def watcher_flags(self) -> WatcherFlags:
        """The kinds of change that are reported."""
        return self._watcher_flags

    @property
    def include_subdirectories(self) -> bool:
        """Whether changes in subdirectories are reported."""
        return self._include_subdirectories

    @staticmethod
    def _normalize(extension: str | os.PathLike[str]) -> str:
        return os.fspath(extension)

    def is_extension_watched(self, extension: str | os.PathLike[str]) -> bool:
        """Return True if files with ``extension`` (such as ``".txt"``) are reported."""
        with self._lock:
            if not self._extension_filters:
                return True
            return self._normalize(extension) in self._extension_filters

    def add_extension_filter(self, extension: str | os.PathLike[str]) -> bool:
        """Report files with ``extension``; False if it was already a filter."""
        value = self._normalize(extension)
        with self._lock:
            if value in self._extension_filters:
                return False
            self._extension_filters.append(value)
            return True

    def remove_extension_filter(self, extension: str | os.PathLike[str]) -> bool:
        """Remove an extension filter; False if it was not one."""
        value = self._normalize(extension)
        with self._lock:
            if value not in self._extension_filters:
                return False
            self._extension_filters.remove(value)
            return True

    def clear_extension_filters(self) -> bool:
        """Remove every extension filter."""
        with self._lock:
            self._extension_filters.clear()
        return True

    def _action_for(self, event: FileSystemEvent) -> FileAction | None:
        flags = self._watcher_flags
        names = bool(flags & WatcherFlags.FILE_NAME) or (
            event.is_directory and bool(flags & WatcherFlags.DIRECTORY_NAME)
        )
        kind = event.event_type
        if kind == "created":
            return FileAction.ADDED if names else None
        if kind == "deleted":
            return FileAction.REMOVED if names else None
        if kind == "moved":
            return FileAction.RENAMED if names else None
        if kind == "modified":
            wanted = WatcherFlags.SIZE | WatcherFlags.LAST_WRITE | WatcherFlags.ATTRIBUTES
            return FileAction.MODIFIED if flags & wanted else None
        if kind == "closed":
            return FileAction.MODIFIED if flags & WatcherFlags.LAST_WRITE else None
        if kind in ("opened", "closed_no_write"):
            return FileAction.MODIFIED if flags & WatcherFlags.LAST_ACCESS else None
        return None

    def _handle(self, event: FileSystemEvent) -> None:
        if not self._watching:
            return
        changed = Path(os.fsdecode(event.src_path))
        if changed == self._path:
            return
        action = self._action_for(event)
        if action is None or not self.is_extension_watched(changed.suffix):
            return
        args = FileSystemChangedEventArgs(changed, action)
        for handler in list(self.changed):
            handler(args)

    def close(self) -> None:
        """Stop watching; safe to call more than once."""
        if not self._watching:
            return
        self._watching = False
        self._observer.stop()
        if self._observer.is_alive() and self._observer is not threading.current_thread():
            self._observer.join()

    def __enter__(self) -> FileSystemWatcher:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()