import pytest

from aurakit.notifyiconmenu import (
    NotifyIconActionMenuItem,
    NotifyIconMenu,
    NotifyIconMenuItemType,
    NotifyIconSeparatorMenuItem,
)


def test_new_menu_is_empty():
    menu = NotifyIconMenu()
    assert len(menu) == 0
    assert menu.get(0) is None


def test_add_returns_indices():
    menu = NotifyIconMenu()
    assert menu.add_action("Open", lambda: None) == 0
    assert menu.add_separator() == 1
    assert menu.add_action("Quit", lambda: None) == 2
    assert len(menu) == 3
    assert [item.type for item in menu] == [
        NotifyIconMenuItemType.ACTION,
        NotifyIconMenuItemType.SEPARATOR,
        NotifyIconMenuItemType.ACTION,
    ]


def test_insert_positions_and_bounds():
    menu = NotifyIconMenu()
    menu.add_action("A", lambda: None)
    assert menu.insert_separator(0) is True
    assert menu[0].type is NotifyIconMenuItemType.SEPARATOR
    assert menu.insert_action(2, "B", lambda: None) is True
    assert menu[2].label == "B"
    assert menu.insert_action(5, "C", lambda: None) is False
    assert menu.insert_separator(-1) is False
    assert len(menu) == 3


def test_remove_checks_type():
    menu = NotifyIconMenu()
    menu.add_action("A", lambda: None)
    menu.add_separator()
    assert menu.remove_separator(0) is False
    assert menu.remove_action(1) is False
    assert menu.remove_separator(1) is True
    assert menu.remove_action(0) is True
    assert len(menu) == 0
    assert menu.remove_action(0) is False


def test_getitem_out_of_range_raises():
    menu = NotifyIconMenu()
    menu.add_separator()
    assert menu[0].type is NotifyIconMenuItemType.SEPARATOR
    assert menu.get(1) is None
    with pytest.raises(IndexError):
        menu[1]
    with pytest.raises(IndexError):
        menu[-1]


def test_action_item_invokes_callback():
    calls = []
    item = NotifyIconActionMenuItem("Go", lambda: calls.append("go"))
    item.invoke()
    item()
    assert calls == ["go", "go"]
    assert item.label == "Go"
    assert item.type is NotifyIconMenuItemType.ACTION


def test_menu_action_runs_from_menu():
    calls = []
    menu = NotifyIconMenu()
    index = menu.add_action("Run", lambda: calls.append(1))
    menu[index]()
    assert calls == [1]


def test_separator_item_type():
    assert NotifyIconSeparatorMenuItem().type is NotifyIconMenuItemType.SEPARATOR