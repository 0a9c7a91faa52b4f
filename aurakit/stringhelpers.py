"""String utilities: base64, URL validation, splitting, trimming and parsing."""

from __future__ import annotations

import base64 as _base64
import re
import string
import uuid
from itertools import takewhile
from urllib.parse import urlsplit

__all__ = [
    "decode",
    "encode",
    "is_valid_url",
    "join",
    "new_guid",
    "replace",
    "split",
    "split_args",
    "stoui",
    "lower",
    "upper",
    "trim",
]

_WHITESPACE = " \t\n\v\f\r"
_UINT_MAX = 0xFFFFFFFF
_ULONG_MAX = 0xFFFFFFFFFFFFFFFF
_INVALID = 0xFF

_SEXTETS: dict[str, int] = {
    ch: value
    for value, ch in enumerate(string.ascii_uppercase + string.ascii_lowercase + string.digits)
}
_SEXTETS.update({"+": 62, "-": 62, "/": 63, "_": 63})

_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_URL_SCHEMES = frozenset(
    {
        "dict", "file", "ftp", "ftps", "gopher", "gophers", "http", "https",
        "imap", "imaps", "ldap", "ldaps", "mqtt", "pop3", "pop3s", "rtmp",
        "rtsp", "scp", "sftp", "smb", "smbs", "smtp", "smtps", "telnet",
        "tftp", "ws", "wss",
    }
)

_ARG_PATTERN = re.compile(r"""((?:[^\s'"]+|"[^"]*"|'[^']*')+)""")


def decode(base64: str) -> bytes:
    """Decode a base64 string (standard or url-safe alphabet).

    Returns empty bytes if the input is empty or its length is not a multiple of 4.
    """
    if not base64 or len(base64) % 4 != 0:
        return b""
    out = bytearray()
    chunks = zip(*[iter(base64)] * 4)
    for chunk in chunks:
        a, b, c, d = (_SEXTETS.get(ch, _INVALID) for ch in chunk)
        if b != _INVALID:
            out.append((((a & 0x3F) << 2) + ((b & 0x30) >> 4)) & 0xFF)
        if c != _INVALID:
            out.append((((b & 0x0F) << 4) + ((c & 0x3C) >> 2)) & 0xFF)
        if d != _INVALID:
            out.append((((c & 0x03) << 6) + (d & 0x3F)) & 0xFF)
    return bytes(out)


def encode(data: bytes) -> str:
    """Encode bytes as a padded standard base64 string."""
    if not data:
        return ""
    return _base64.b64encode(bytes(data)).decode("ascii")


def is_valid_url(s: str) -> bool:
    """Return True if ``s`` is an absolute URL with a supported scheme."""
    if not s or any(ch.isspace() or ord(ch) < 0x20 for ch in s):
        return False
    try:
        parts = urlsplit(s)
        _ = parts.port
    except ValueError:
        return False
    scheme = parts.scheme.lower()
    if scheme not in _URL_SCHEMES:
        return False
    if scheme == "file":
        return s[len(parts.scheme):].startswith("://")
    return bool(parts.hostname)


def join(values: list[str], separator: str, separate_last: bool = True) -> str:
    """Join ``values`` with ``separator``, optionally appending it after the last value."""
    joined = separator.join(values)
    if values and separate_last:
        joined += separator
    return joined


def new_guid() -> str:
    """Return a new random GUID in the lowercase 8-4-4-4-12 form."""
    return str(uuid.uuid4())


def replace(s: str, to_replace: str, replacement: str) -> str:
    """Replace every occurrence of ``to_replace`` in ``s``."""
    if not s or not to_replace:
        return s
    return s.replace(to_replace, replacement)


def split(s: str, delimiter: str) -> list[str]:
    """Split ``s`` on ``delimiter``; an empty string gives an empty list."""
    if not s:
        return []
    if not delimiter:
        return [s]
    return s.split(delimiter)


def split_args(s: str) -> list[str]:
    """Split a command line into arguments, honouring single and double quotes."""
    args: list[str] = []
    while (match := _ARG_PATTERN.search(s)) is not None:
        arg = match.group()
        if len(arg) > 1 and arg[0] == arg[-1] and arg[0] in "'\"":
            arg = arg[1:-1]
        args.append(arg)
        s = s[match.end():]
    if s:
        args.append(s)
    return args


def _digit_value(ch: str) -> int:
    if ch.isascii() and ch.isalnum():
        return int(ch, 36)
    return 99


def _is_hex_digit(ch: str) -> bool:
    return _digit_value(ch) < 16


def stoui(s: str, base: int = 10) -> int:
    """Parse an unsigned int the way ``strtoul`` does, clamped to 32 bits.

    Returns 0 when nothing can be parsed or the value overflows 64 bits.
    """
    if base != 0 and not 2 <= base <= 36:
        return 0
    text = s.lstrip(_WHITESPACE)
    negative = False
    if text and text[0] in "+-":
        negative = text[0] == "-"
        text = text[1:]
    has_hex_prefix = text[:2] in ("0x", "0X") and len(text) > 2 and _is_hex_digit(text[2])
    if base == 0:
        if has_hex_prefix:
            base, text = 16, text[2:]
        elif text.startswith("0"):
            base = 8
        else:
            base = 10
    elif base == 16 and has_hex_prefix:
        text = text[2:]
    digits = "".join(takewhile(lambda ch: _digit_value(ch) < base, text))
    if not digits:
        return 0
    value = int(digits, base)
    if value > _ULONG_MAX:
        return 0
    if negative:
        value = (-value) % (_ULONG_MAX + 1)
    return min(value, _UINT_MAX)


def lower(s: str) -> str:
    """Lowercase the ASCII letters of ``s``."""
    return s.translate(_LOWER_TABLE)


def upper(s: str) -> str:
    """Uppercase the ASCII letters of ``s``."""
    return s.translate(_UPPER_TABLE)


def trim(s: str, delimiter: str | None = None) -> str:
    """Strip whitespace, or a given single character, from both ends of ``s``."""
    if delimiter is None:
        return s.strip(_WHITESPACE)
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return s.strip(delimiter)