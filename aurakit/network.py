"""HTTP requests, downloads and network connection state."""

from __future__ import annotations

import os
import urllib.error
import urllib.request
from dataclasses import dataclass
from enum import IntEnum
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Callable

__all__ = [
    "NetworkState",
    "NetworkStateChangedEventArgs",
    "CurlEasy",
    "WebClient",
]

ProgressFunction = Callable[[int, int, int, int], int]

_CHUNK_SIZE = 16 * 1024


class NetworkState(IntEnum):
    """States of a network connection."""

    DISCONNECTED = 0
    CONNECTED_LOCAL = 1
    CONNECTED_GLOBAL = 2


@dataclass(frozen=True)
class NetworkStateChangedEventArgs:
    """Event data for a change of the network state."""

    state: NetworkState

    def __post_init__(self) -> None:
        object.__setattr__(self, "state", NetworkState(self.state))


def _parse_header(header: str) -> tuple[str, str]:
    name, sep, value = header.partition(":")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"invalid header: {header!r}")
    return name, value.strip()


class CurlEasy:
    """A single configurable HTTP request.

    ``progress`` is called as ``progress(dltotal, dlnow, ultotal, ulnow)``
    while the response is read; a non-zero return aborts the transfer.
    """

    def __init__(self, url: str = "") -> None:
        self.reset(url)

    @property
    def headers(self) -> list[str]:
        """Extra request headers, each of the form ``"Name: value"``."""
        return list(self._headers)

    @headers.setter
    def headers(self, headers: list[str]) -> None:
        values = list(headers)
        for header in values:
            _parse_header(header)
        self._headers = values

    def reset(self, url: str = "") -> None:
        """Clear every option and set the url to request."""
        self.url = url
        self.no_body = False
        self._headers: list[str] = []
        self.user_agent = ""
        self.stream: BinaryIO | None = None
        self.progress: ProgressFunction | None = None

    def _report(self, total: int, now: int) -> None:
        if self.progress is not None and self.progress(total, now, 0, 0):
            raise ConnectionAbortedError("Transfer aborted by progress function.")

    def perform(self) -> int:
        """Send the request and return the HTTP status code.

        The response body is written to ``stream`` unless ``no_body`` is set.
        Raises ValueError for an empty or malformed url, OSError when the
        transfer fails and ConnectionAbortedError when ``progress`` aborts it.
        """
        if not self.url:
            raise ValueError("No url to request.")
        request = urllib.request.Request(self.url, method="HEAD" if self.no_body else "GET")
        for header in self._headers:
            name, value = _parse_header(header)
            request.add_header(name, value)
        if self.user_agent:
            request.add_header("User-Agent", self.user_agent)
        opener = urllib.request.build_opener()
        try:
            response = opener.open(request)
        except urllib.error.HTTPError as error:
            response = error
        with response:
            status = response.status if response.status is not None else response.code
            if self.no_body:
                return status
            total = int(response.headers.get("Content-Length") or 0)
            received = 0
            self._report(total, received)
            while chunk := response.read(_CHUNK_SIZE):
                received += len(chunk)
                if self.stream is not None:
                    self.stream.write(chunk)
                self._report(total, received)
        return status


class WebClient:
    """Convenience operations for checking, fetching and downloading from the web."""

    def website_exists(self, url: str) -> bool:
        """Return True if ``url`` answers with a non-error status."""
        if not url:
            return False
        request = CurlEasy(url)
        request.no_body = True
        try:
            return request.perform() < 400
        except (OSError, ValueError):
            return False

    def fetch_json(self, url: str) -> str:
        """Return the body fetched from ``url``, or an empty string on failure."""
        buffer = BytesIO()
        request = CurlEasy(url)
        request.headers = ["Content-Type: application/json"]
        request.stream = buffer
        try:
            status = request.perform()
        except (OSError, ValueError):
            return ""
        if status >= 400:
            return ""
        return buffer.getvalue().decode("utf-8", errors="replace")

    def download_file(
        self,
        url: str,
        path: str | os.PathLike[str],
        progress: ProgressFunction | None = None,
        overwrite: bool = True,
    ) -> bool:
        """Download ``url`` to ``path``; False if it exists and may not be replaced, or on failure."""
        target = Path(path)
        if target.exists() and not overwrite:
            return False
        request = CurlEasy(url)
        request.progress = progress
        try:
            with target.open("wb") as handle:
                request.stream = handle
                status = request.perform()
        except (OSError, ValueError):
            target.unlink(missing_ok=True)
            return False
        if status >= 400:
            target.unlink(missing_ok=True)
            return False
        return True