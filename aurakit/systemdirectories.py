"""Directory lists taken from the system's search-path environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from .stringhelpers import split

__all__ = ["path_dirs", "config_dirs", "data_dirs"]


def _dirs_from_variable(name: str) -> list[Path]:
    value = os.environ.get(name, "")
    return [Path(entry) for entry in split(value, os.pathsep)]


def path_dirs() -> list[Path]:
    """Return the directories listed in ``PATH``."""
    return _dirs_from_variable("PATH")


def config_dirs() -> list[Path]:
    """Return the directories listed in ``XDG_CONFIG_DIRS``."""
    return _dirs_from_variable("XDG_CONFIG_DIRS")


def data_dirs() -> list[Path]:
    """Return the directories listed in ``XDG_DATA_DIRS``."""
    return _dirs_from_variable("XDG_DATA_DIRS")