"""File helpers that report failure by return value and remember the last OS error."""

from __future__ import annotations

import os
import threading
from pathlib import Path

__all__ = ["last_system_error", "read_file_bytes", "write_file_bytes"]

_errors = threading.local()


def _record(error: OSError) -> None:
    _errors.errno = error.errno or 0


def last_system_error() -> str:
    """Return the message for the last OS error raised by this module in this thread."""
    return os.strerror(getattr(_errors, "errno", 0))


def read_file_bytes(path: str | os.PathLike[str]) -> bytes:
    """Read a whole file; returns empty bytes if it is missing or unreadable."""
    file_path = Path(path)
    if not file_path.exists():
        return b""
    try:
        return file_path.read_bytes()
    except OSError as error:
        _record(error)
        return b""


def write_file_bytes(path: str | os.PathLike[str], data: bytes, overwrite: bool = True) -> bool:
    """Write ``data`` to a file, refusing to replace it unless ``overwrite`` is set."""
    file_path = Path(path)
    if file_path.exists() and not overwrite:
        return False
    try:
        file_path.write_bytes(bytes(data))
    except OSError as error:
        _record(error)
        return False
    return True