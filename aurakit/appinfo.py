"""Descriptive information about an application."""

from __future__ import annotations

from typing import Any

import markdown

from .stringhelpers import is_valid_url, split, trim

__all__ = ["AppInfo"]


class AppInfo:
    """Names, version, links and credits of an application."""

    def __init__(
        self,
        id: str = "",
        name: str = "",
        short_name: str = "",
        english_short_name: str = "",
        description: str = "",
        version: Any = None,
        html_docs_store: str = "",
        translator_credits: str = "",
    ) -> None:
        self.id = id
        self.name = name
        self.short_name = short_name
        self.english_short_name = english_short_name
        self.description = description
        self.version = version
        self.html_docs_store = html_docs_store
        self.translator_credits = translator_credits
        self.extra_links: dict[str, str] = {}
        self.developers: dict[str, str] = {}
        self.designers: dict[str, str] = {}
        self.artists: dict[str, str] = {}
        self._changelog = ""
        self._html_changelog = ""
        self._source_repo = ""
        self._issue_tracker = ""
        self._support_url = ""

    @property
    def changelog(self) -> str:
        """The changelog in markdown; setting it also renders the HTML form."""
        return self._changelog

    @changelog.setter
    def changelog(self, value: str) -> None:
        self._changelog = value
        if not value:
            self._html_changelog = ""
            return
        lines = [trim(line) + "\n" for line in split(trim(value), "\n") if line]
        self._html_changelog = markdown.markdown("".join(lines))

    @property
    def html_changelog(self) -> str:
        """The changelog rendered as HTML."""
        return self._html_changelog

    @staticmethod
    def _checked_url(url: str) -> str:
        if not is_valid_url(url):
            raise ValueError(f"invalid url: {url!r}")
        return url

    @property
    def source_repo(self) -> str:
        """The source repository url."""
        return self._source_repo

    @source_repo.setter
    def source_repo(self, value: str) -> None:
        self._source_repo = self._checked_url(value)

    @property
    def issue_tracker(self) -> str:
        """The issue tracker url."""
        return self._issue_tracker

    @issue_tracker.setter
    def issue_tracker(self, value: str) -> None:
        self._issue_tracker = self._checked_url(value)

    @property
    def support_url(self) -> str:
        """The support url."""
        return self._support_url

    @support_url.setter
    def support_url(self, value: str) -> None:
        self._support_url = self._checked_url(value)

    def translator_names(self) -> list[str]:
        """Return translator names from the credits, without e-mails or links."""
        names: list[str] = []
        for line in split(self.translator_credits, "\n"):
            if "<" in line:
                names.append(trim(line[: line.index("<")]))
            elif "http" in line:
                names.append(trim(line[: line.index("http")]))
            else:
                names.append(line)
        return names

    @staticmethod
    def convert_url_map_to_list(urls: dict[str, str]) -> list[str]:
        """Return each ``name url`` pair of a mapping as one string."""
        return [f"{name} {url}" for name, url in urls.items()]