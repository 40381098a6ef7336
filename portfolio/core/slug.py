"""
Slug utilities for SEO-friendly URLs.

Pure functions, independent of locale: the same rules apply to Dutch and
English titles.
"""

from __future__ import annotations

import re
import unicodedata

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

MIN_SLUG_LENGTH = 2


def generate_slug(text: str) -> str:
    """
    Convert a title to a URL-friendly slug.
    
    Lower-cases, folds accented characters to their base letter, drops
    anything outside ``[a-z0-9\\s-]``, turns whitespace runs into a single
    hyphen, collapses repeated hyphens and trims them from both ends.
    
    Returns an empty string when nothing usable is left; callers must treat
    that as invalid.
    
    Examples:
        >>> generate_slug("Café Müller!!")
        'cafe-muller'
        >>> generate_slug("  Voice   AI -- Demo ")
        'voice-ai-demo'
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    slug = _INVALID_CHARS.sub("", stripped)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def is_valid_slug(slug: str) -> bool:
    """
    Check that a slug has the routable format.
    
    Lower-case letters, digits and single hyphens only, no leading or
    trailing hyphen, at least two characters.
    """
    if not isinstance(slug, str) or len(slug) < MIN_SLUG_LENGTH:
        return False
    return _SLUG_PATTERN.match(slug) is not None
