"""
Supported locales.

The site is bilingual: Dutch is the primary locale and English the
secondary one. Anything locale-aware iterates over `Locale` rather than
hard-coding the two codes.
"""

from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """Supported site locales."""
    
    NL = "nl"  # Dutch (primary, mirrors legacy default fields)
    EN = "en"  # English
    
    @property
    def language_name(self) -> str:
        """Human-readable language name, as used in AI prompts."""
        return LOCALE_NAMES[self]
    
    @property
    def other(self) -> Locale:
        """The other supported locale."""
        return Locale.EN if self is Locale.NL else Locale.NL


DEFAULT_LOCALE = Locale.NL

LOCALE_NAMES: dict[Locale, str] = {
    Locale.NL: "Dutch",
    Locale.EN: "English",
}


def normalize_locale_code(code: str) -> str:
    """Normalize a locale code or language name to its short form."""
    code = code.lower().strip().replace("_", "-")
    
    variants = {
        "dutch": "nl",
        "nederlands": "nl",
        "nl-nl": "nl",
        "nl-be": "nl",
        "english": "en",
        "en-us": "en",
        "en-gb": "en",
    }
    
    return variants.get(code, code)


def get_locale(code: str | Locale | None) -> Locale | None:
    """Get Locale by code, or None when unsupported."""
    if code is None:
        return None
    if isinstance(code, Locale):
        return code
    try:
        return Locale(normalize_locale_code(code))
    except ValueError:
        return None
