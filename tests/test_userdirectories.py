import sys
from pathlib import Path

import pytest

from aurakit import userdirectories

_XDG_VARS = [
    "XDG_CONFIG_HOME",
    "XDG_CACHE_HOME",
    "XDG_DATA_HOME",
    "XDG_RUNTIME_DIR",
    "XDG_DESKTOP_DIR",
    "XDG_DOCUMENTS_DIR",
    "XDG_DOWNLOAD_DIR",
    "XDG_MUSIC_DIR",
    "XDG_PICTURES_DIR",
    "XDG_PUBLICSHARE_DIR",
    "XDG_TEMPLATES_DIR",
    "XDG_VIDEOS_DIR",
]


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for name in _XDG_VARS:
        monkeypatch.delenv(name, raising=False)
    return home_dir


def test_home_from_environment(fake_home):
    assert userdirectories.home() == fake_home


def test_config_falls_back_to_dot_config(fake_home):
    result = userdirectories.config()
    assert result == fake_home / ".config"
    assert result.is_dir()


def test_config_from_environment(fake_home, tmp_path, monkeypatch):
    target = tmp_path / "cfg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(target))
    assert userdirectories.config() == target
    assert target.is_dir()


def test_application_config_is_created(fake_home):
    result = userdirectories.application_config("MyApp")
    assert result == fake_home / ".config" / "MyApp"
    assert result.is_dir()


def test_cache_and_application_cache(fake_home):
    assert userdirectories.cache() == fake_home / ".cache"
    app_cache = userdirectories.application_cache("MyApp")
    assert app_cache == fake_home / ".cache" / "MyApp"
    assert app_cache.is_dir()


def test_local_data_fallback(fake_home):
    assert userdirectories.local_data() == fake_home / ".local" / "share"
    app_data = userdirectories.application_local_data("MyApp")
    assert app_data.parent == fake_home / ".local" / "share"
    assert app_data.is_dir()


def test_runtime_from_environment(fake_home, tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path / "run"))
    assert userdirectories.runtime() == tmp_path / "run"


def test_runtime_falls_back_to_uid(fake_home, monkeypatch):
    monkeypatch.setenv("UID", "1000")
    assert userdirectories.runtime() == Path("/run/user/1000")


def test_runtime_is_none_off_linux(fake_home, monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    assert userdirectories.runtime() is None


def test_desktop_from_environment(fake_home, tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DESKTOP_DIR", str(tmp_path / "desk"))
    assert userdirectories.desktop() == tmp_path / "desk"
    assert (tmp_path / "desk").is_dir()


def test_desktop_falls_back_to_home(fake_home):
    result = userdirectories.desktop()
    assert result == fake_home / "Desktop"
    assert result.is_dir()


@pytest.mark.parametrize(
    ("function", "folder"),
    [
        (userdirectories.documents, "Documents"),
        (userdirectories.downloads, "Downloads"),
        (userdirectories.music, "Music"),
        (userdirectories.pictures, "Pictures"),
        (userdirectories.templates, "Templates"),
        (userdirectories.videos, "Videos"),
    ],
)
def test_user_dirs_fallback(fake_home, function, folder):
    assert function() == fake_home / folder


def test_user_dirs_file_is_parsed(fake_home):
    config_dir = fake_home / ".config"
    config_dir.mkdir()
    (config_dir / "user-dirs.dirs").write_text(
        '# XDG_DESKTOP_DIR="$HOME/Wrong"\n'
        "\n"
        'XDG_DESKTOP_DIR="$HOME/Schreibtisch"\n'
        'XDG_MUSIC_DIR="$HOME/Musik"\n',
        encoding="utf-8",
    )
    assert userdirectories.desktop() == fake_home / "Schreibtisch"
    assert userdirectories.music() == fake_home / "Musik"
    assert not (fake_home / "Wrong").exists()


def test_public_share_missing_is_none(fake_home):
    assert userdirectories.public_share() is None


def test_public_share_from_file(fake_home):
    config_dir = fake_home / ".config"
    config_dir.mkdir()
    (config_dir / "user-dirs.dirs").write_text(
        'XDG_PUBLICSHARE_DIR="$HOME/Public"\n', encoding="utf-8"
    )
    assert userdirectories.public_share() == fake_home / "Public"


def test_mac_ignores_xdg_variables(fake_home, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setenv("XDG_DESKTOP_DIR", str(tmp_path / "desk"))
    assert userdirectories.desktop() == fake_home / "Desktop"