"""Lightweight dictionary-based i18n for Koda.

English strings are the lookup keys. Templates use ``str.format`` fields
(``{name}``, ``{error}``, ...) that :func:`tr` fills after translation.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_current_strings: dict[str, str] = {}
_current_lang: str = "en"


def init_language(lang_code: str = "en") -> None:
    """Load language strings. Call once at app startup before UI creation.

    Unsupported codes fall back to English.
    """
    global _current_strings, _current_lang
    if lang_code == "ko":
        from koda.utils.lang.ko import STRINGS
        _current_strings = STRINGS
        _current_lang = "ko"
        return
    if lang_code != "en":
        logger.warning(f"Unsupported UI language '{lang_code}', using English")
    _current_strings = {}
    _current_lang = "en"


def tr(key: str, **fields: object) -> str:
    """Translate *key* and fill its ``{fields}``. Untranslated keys are used as-is."""
    text = _current_strings.get(key, key)
    return text.format(**fields) if fields else text


def current_language() -> str:
    """Return the active language code ('en' or 'ko')."""
    return _current_lang
