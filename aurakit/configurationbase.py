"""A JSON configuration file stored in the application's config directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from .userdirectories import application_config

__all__ = ["ConfigurationBase"]


class ConfigurationBase:
    """Loads ``<key>.json`` from the application config directory and saves it back."""

    def __init__(self, key: str, app_name: str) -> None:
        if not key:
            raise ValueError("Key must not be empty.")
        self._key = key
        self._path = application_config(app_name) / f"{key}.json"
        self.json: dict[str, Any] = {}
        self.saved: list[Callable[[], None]] = []
        if self._path.exists():
            with self._path.open(encoding="utf-8") as source:
                self.json = json.load(source)

    @property
    def key(self) -> str:
        """The key naming the configuration file."""
        return self._key

    @property
    def path(self) -> Path:
        """The path of the configuration file."""
        return self._path

    def save(self) -> bool:
        """Write the configuration to disk and notify the ``saved`` handlers."""
        with self._path.open("w", encoding="utf-8") as target:
            json.dump(self.json, target)
        for handler in list(self.saved):
            handler()
        return True