"""Locations of the current user's standard directories."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .stringhelpers import split, trim

__all__ = [
    "home",
    "config",
    "application_config",
    "cache",
    "application_cache",
    "local_data",
    "application_local_data",
    "runtime",
    "desktop",
    "documents",
    "downloads",
    "music",
    "pictures",
    "public_share",
    "templates",
    "videos",
]


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def _is_linux() -> bool:
    return sys.platform.startswith("linux")


def _is_mac() -> bool:
    return sys.platform == "darwin"


def _env(name: str) -> str:
    return os.environ.get(name, "")


def _created(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def _xdg_user_dir(key: str) -> Path | None:
    """Look up an XDG user directory from the environment or ``user-dirs.dirs``."""
    if _is_mac():
        return None
    value = _env(key)
    if value:
        return Path(value)
    dirs_path = config() / "user-dirs.dirs"
    if not dirs_path.exists():
        return None
    with dirs_path.open(encoding="utf-8") as dirs:
        for raw_line in dirs:
            line = raw_line.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            pair = split(line, "=")
            if pair[0] != key or len(pair) < 2:
                continue
            found = pair[1].replace("$HOME", str(home()), 1)
            found = trim(found, '"')
            return Path(found) if found else None
    return None


def _user_dir(key: str, folder_name: str) -> Path:
    if _is_windows():
        return _created(home() / folder_name)
    return _created(_xdg_user_dir(key) or home() / folder_name)


def home() -> Path:
    """Return the user's home directory."""
    if _is_windows():
        profile = _env("USERPROFILE")
        return Path(profile) if profile else Path.home()
    value = _env("HOME")
    if value:
        return Path(value)
    import pwd

    return Path(pwd.getpwuid(os.getuid()).pw_dir)


def config() -> Path:
    """Return the user's configuration directory, creating it if needed."""
    if _is_windows():
        value = _env("APPDATA")
        return _created(Path(value) if value else home() / "AppData" / "Roaming")
    value = _env("XDG_CONFIG_HOME")
    return _created(Path(value) if value else home() / ".config")


def application_config(app_name: str) -> Path:
    """Return the configuration directory of application ``app_name``."""
    return _created(config() / app_name)


def cache() -> Path:
    """Return the user's cache directory, creating it if needed."""
    if _is_windows():
        value = _env("LOCALAPPDATA")
        return _created(Path(value) if value else home() / "AppData" / "Local")
    value = _env("XDG_CACHE_HOME")
    return _created(Path(value) if value else home() / ".cache")


def application_cache(app_name: str) -> Path:
    """Return the cache directory of application ``app_name``."""
    return _created(cache() / app_name)


def local_data() -> Path:
    """Return the user's local data directory, creating it if needed."""
    if _is_windows():
        return _created(config())
    value = _env("XDG_DATA_HOME")
    return _created(Path(value) if value else home() / ".local" / "share")


def application_local_data(app_name: str) -> Path:
    """Return the local data directory of application ``app_name``."""
    return _created(local_data() / app_name)


def runtime() -> Path | None:
    """Return the user's runtime directory on Linux, else None."""
    if not _is_linux():
        return None
    value = _env("XDG_RUNTIME_DIR")
    return Path(value) if value else Path("/run/user") / _env("UID")


def desktop() -> Path:
    """Return the user's desktop directory."""
    return _user_dir("XDG_DESKTOP_DIR", "Desktop")


def documents() -> Path:
    """Return the user's documents directory."""
    return _user_dir("XDG_DOCUMENTS_DIR", "Documents")


def downloads() -> Path:
    """Return the user's downloads directory."""
    return _user_dir("XDG_DOWNLOAD_DIR", "Downloads")


def music() -> Path:
    """Return the user's music directory."""
    return _user_dir("XDG_MUSIC_DIR", "Music")


def pictures() -> Path:
    """Return the user's pictures directory."""
    return _user_dir("XDG_PICTURES_DIR", "Pictures")


def public_share() -> Path | None:
    """Return the user's public share directory on Linux, if one is configured."""
    if not _is_linux():
        return None
    return _xdg_user_dir("XDG_PUBLICSHARE_DIR")


def templates() -> Path:
    """Return the user's templates directory."""
    if _is_windows():
        value = _env("APPDATA")
        base = Path(value) if value else home() / "AppData" / "Roaming"
        return _created(base / "Microsoft" / "Windows" / "Templates")
    return _user_dir("XDG_TEMPLATES_DIR", "Templates")


def videos() -> Path:
    """Return the user's videos directory."""
    return _user_dir("XDG_VIDEOS_DIR", "Videos")