"""The model of a context menu for a system tray icon."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterator

__all__ = [
    "NotifyIconMenuItemType",
    "NotifyIconMenuItem",
    "NotifyIconSeparatorMenuItem",
    "NotifyIconActionMenuItem",
    "NotifyIconMenu",
]


class NotifyIconMenuItemType(IntEnum):
    """Kinds of menu item."""

    ACTION = 0
    SEPARATOR = 1


class NotifyIconMenuItem:
    """A generic menu item."""

    def __init__(self, type: NotifyIconMenuItemType) -> None:
        self._type = NotifyIconMenuItemType(type)

    @property
    def type(self) -> NotifyIconMenuItemType:
        """The kind of this item."""
        return self._type


class NotifyIconSeparatorMenuItem(NotifyIconMenuItem):
    """A separator line in the menu."""

    def __init__(self) -> None:
        super().__init__(NotifyIconMenuItemType.SEPARATOR)


class NotifyIconActionMenuItem(NotifyIconMenuItem):
    """A labelled item that runs a callback when clicked."""

    def __init__(self, label: str, action: Callable[[], None]) -> None:
        super().__init__(NotifyIconMenuItemType.ACTION)
        self._label = label
        self._action = action

    @property
    def label(self) -> str:
        """The text shown for the item."""
        return self._label

    def invoke(self) -> None:
        """Run the item's callback."""
        self._action()

    def __call__(self) -> None:
        self.invoke()


class NotifyIconMenu:
    """An ordered list of menu items."""

    def __init__(self) -> None:
        self._items: list[NotifyIconMenuItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[NotifyIconMenuItem]:
        return iter(self._items)

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def get(self, index: int) -> NotifyIconMenuItem | None:
        """Return the item at ``index``, or None if there is none."""
        return self._items[index] if self._valid(index) else None

    def __getitem__(self, index: int) -> NotifyIconMenuItem:
        item = self.get(index)
        if item is None:
            raise IndexError(f"menu index out of range: {index}")
        return item

    def _insert(self, index: int, item: NotifyIconMenuItem) -> bool:
        if not 0 <= index <= len(self._items):
            return False
        self._items.insert(index, item)
        return True

    def _remove(self, index: int, kind: NotifyIconMenuItemType) -> bool:
        if not self._valid(index) or self._items[index].type != kind:
            return False
        del self._items[index]
        return True

    def add_separator(self) -> int:
        """Append a separator and return its index."""
        self._items.append(NotifyIconSeparatorMenuItem())
        return len(self._items) - 1

    def insert_separator(self, index: int) -> bool:
        """Insert a separator at ``index``; False if the index is out of range."""
        return self._insert(index, NotifyIconSeparatorMenuItem())

    def remove_separator(self, index: int) -> bool:
        """Remove the separator at ``index``; False if there is none there."""
        return self._remove(index, NotifyIconMenuItemType.SEPARATOR)

    def add_action(self, label: str, action: Callable[[], None]) -> int:
        """Append an action item and return its index."""
        self._items.append(NotifyIconActionMenuItem(label, action))
        return len(self._items) - 1

    def insert_action(self, index: int, label: str, action: Callable[[], None]) -> bool:
        """Insert an action item at ``index``; False if the index is out of range."""
        return self._insert(index, NotifyIconActionMenuItem(label, action))

    def remove_action(self, index: int) -> bool:
        """Remove the action item at ``index``; False if there is none there."""
        return self._remove(index, NotifyIconMenuItemType.ACTION)