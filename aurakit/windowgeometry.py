"""The size and maximised state of an application window."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WindowGeometry"]


@dataclass
class WindowGeometry:
    """Width, height and maximised state of a window."""

    width: int = 800
    height: int = 600
    is_maximized: bool = False