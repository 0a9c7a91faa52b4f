"""The application context: identity, logging, translation and environment checks."""

from __future__ import annotations

import locale
import os
import sys
from pathlib import Path

from . import localization
from .appinfo import AppInfo
from .ipc import InterProcessCommunicator
from .logger import Logger, LogLevel
from .stringhelpers import lower, replace, split
from .systemdirectories import path_dirs
from .userdirectories import application_cache

__all__ = ["Aura"]

_WINDOWS_APPS_DIR = "AppData\\Local\\Microsoft\\WindowsApps"


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def _is_linux() -> bool:
    return sys.platform.startswith("linux")


def _is_mac() -> bool:
    return sys.platform == "darwin"


def _find_executable_directory() -> Path:
    if getattr(sys, "frozen", False):
        target = sys.executable
    else:
        target = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    if not target:
        raise RuntimeError("Unable to get executable directory.")
    return Path(target).resolve().parent


def _system_locale() -> str:
    for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(name, "")
        if value:
            return split(split(value, ".")[0], "@")[0]
    if _is_windows():
        current = locale.getlocale()[0] or ""
        return replace(current, "-", "_")
    return "C"


class Aura:
    """Holds the state an application sets up once at start-up."""

    _active: Aura | None = None

    def __init__(self) -> None:
        self._initialized = False
        self._executable_directory: Path | None = None
        self._app_info = AppInfo()
        self._logger: Logger | None = None
        self._ipc: InterProcessCommunicator | None = None
        self._dependencies: dict[str, Path | None] = {}

    def init(
        self,
        app_id: str,
        name: str,
        english_short_name: str,
        log_level: LogLevel = LogLevel.DEBUG,
    ) -> bool:
        """Set up the application once; later calls change nothing."""
        if not self._initialized:
            self._executable_directory = _find_executable_directory()
            self._app_info.id = app_id
            self._app_info.name = name
            self._app_info.english_short_name = english_short_name
            domain = lower(replace(english_short_name, " ", ""))
            if not localization.init(domain):
                raise RuntimeError("Unable to initialize gettext.")
            log_path = application_cache(name) / "log.txt"
            log_path.unlink(missing_ok=True)
            self._logger = Logger(log_path, log_level)
            self._initialized = True
        return self._initialized

    def is_valid(self) -> bool:
        """Return True once ``init`` has succeeded."""
        return self._initialized

    def __bool__(self) -> bool:
        return self.is_valid()

    def executable_directory(self) -> Path | None:
        """The directory of the running program, known after ``init``."""
        return self._executable_directory

    def is_running_on_windows(self) -> bool:
        return _is_windows()

    def is_running_on_linux(self) -> bool:
        return _is_linux()

    def is_running_on_mac(self) -> bool:
        return _is_mac()

    def is_running_via_flatpak(self) -> bool:
        return Path("/.flatpak-info").exists()

    def is_running_via_snap(self) -> bool:
        return bool(os.environ.get("SNAP", ""))

    def is_running_via_local(self) -> bool:
        return not self.is_running_via_flatpak() and not self.is_running_via_snap()

    def app_info(self) -> AppInfo:
        """The application's descriptive information."""
        return self._app_info

    def ipc(self) -> InterProcessCommunicator:
        """The inter-process communicator for the application id, created on first use."""
        if self._ipc is None:
            self._ipc = InterProcessCommunicator(self._app_info.id)
        return self._ipc

    def logger(self) -> Logger:
        """The application logger; raises RuntimeError before ``init``."""
        if self._logger is None:
            raise RuntimeError("Aura is not initialized.")
        return self._logger

    def find_dependency(self, dependency: str) -> Path | None:
        """Locate a program beside the executable or on ``PATH``; None if not found."""
        if _is_windows() and not Path(dependency).suffix:
            dependency += ".exe"
        cached = self._dependencies.get(dependency)
        if cached is not None and cached.exists():
            return cached
        self._dependencies[dependency] = None
        if self._executable_directory is not None:
            beside = self._executable_directory / dependency
            if beside.exists():
                self._dependencies[dependency] = beside
                return beside
        for directory in path_dirs():
            candidate = directory / dependency
            if candidate.exists() and _WINDOWS_APPS_DIR not in str(directory):
                self._dependencies[dependency] = candidate
                break
        return self._dependencies[dependency]

    def help_url(self, page_name: str) -> str:
        """Return the url of a documentation page in the user's language where available."""
        if _is_linux() and not os.environ.get("SNAP", ""):
            return f"help:{lower(self._app_info.english_short_name)}/{page_name}"
        lang = "C"
        sys_locale = _system_locale()
        if sys_locale and sys_locale not in ("C", "en_US", "*") and self._executable_directory is not None:
            two_letter = split(sys_locale, "_")[0]
            mo_name = localization.domain_name() + ".mo"
            for entry in sorted(self._executable_directory.iterdir()):
                if entry.is_dir() and (entry / mo_name).exists() and entry.name in (sys_locale, two_letter):
                    lang = entry.name
                    break
        return f"https://htmlpreview.github.io/?{self._app_info.html_docs_store}/{lang}/{page_name}.html"

    @classmethod
    def get_active(cls) -> Aura:
        """Return the process-wide Aura instance."""
        if cls._active is None:
            cls._active = cls()
        return cls._active