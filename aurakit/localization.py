"""Gettext-based translation for a single application domain."""

from __future__ import annotations

import gettext
import threading
from dataclasses import dataclass, field

__all__ = [
    "init",
    "domain_name",
    "translate",
    "translate_plural",
    "pgettext",
    "pngettext",
]


@dataclass
class _State:
    domain: str = ""
    translations: gettext.NullTranslations = field(default_factory=gettext.NullTranslations)
    initialized: bool = False


_state = _State()
_lock = threading.Lock()


def init(domain_name: str) -> bool:
    """Initialise translations for ``domain_name``.

    Only the first successful call takes effect; later calls keep the existing
    domain. Returns True once translations are initialised.
    """
    with _lock:
        if _state.initialized:
            return True
        if not domain_name:
            return False
        localedir = gettext.bindtextdomain(domain_name)
        _state.translations = gettext.translation(domain_name, localedir, fallback=True)
        _state.domain = domain_name
        _state.initialized = True
        return True


def domain_name() -> str:
    """Return the domain used for translations, or an empty string before init."""
    return _state.domain


def translate(msg: str) -> str:
    """Translate a message."""
    return _state.translations.gettext(msg)


def translate_plural(msg: str, msg_plural: str, n: int) -> str:
    """Translate a message, choosing the plural form for ``n``."""
    return _state.translations.ngettext(msg, msg_plural, int(n))


def pgettext(context: str, msg: str) -> str:
    """Translate a message within a context."""
    return _state.translations.pgettext(context, msg)


def pngettext(context: str, msg: str, msg_plural: str, n: int) -> str:
    """Translate a plural message within a context."""
    return _state.translations.npgettext(context, msg, msg_plural, int(n))