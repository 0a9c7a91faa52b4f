import os
from pathlib import Path

import pytest

from aurakit import systemdirectories


@pytest.mark.parametrize(
    ("variable", "function"),
    [
        ("PATH", systemdirectories.path_dirs),
        ("XDG_CONFIG_DIRS", systemdirectories.config_dirs),
        ("XDG_DATA_DIRS", systemdirectories.data_dirs),
    ],
)
def test_directories_are_read_from_variable(monkeypatch, tmp_path, variable, function):
    first = tmp_path / "one"
    second = tmp_path / "two"
    monkeypatch.setenv(variable, os.pathsep.join([str(first), str(second)]))
    assert function() == [first, second]


@pytest.mark.parametrize(
    ("variable", "function"),
    [
        ("PATH", systemdirectories.path_dirs),
        ("XDG_CONFIG_DIRS", systemdirectories.config_dirs),
        ("XDG_DATA_DIRS", systemdirectories.data_dirs),
    ],
)
def test_unset_variable_gives_empty_list(monkeypatch, variable, function):
    monkeypatch.delenv(variable, raising=False)
    assert function() == []


def test_single_entry(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path))
    result = systemdirectories.data_dirs()
    assert result == [Path(tmp_path)]
    assert all(isinstance(entry, Path) for entry in result)