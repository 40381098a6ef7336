"""
Core domain: locales, slugs, the showcase item model and the error taxonomy.
"""

from portfolio.core.errors import (
    AssistError,
    ConflictError,
    EmptyResponseError,
    NotFoundError,
    RateLimitError,
    ShowcaseError,
    UpstreamError,
    ValidationError,
)
from portfolio.core.locales import DEFAULT_LOCALE, Locale, get_locale
from portfolio.core.models import (
    Category,
    LocalizedContent,
    LocalizedPatch,
    ShowcaseDraft,
    ShowcaseItem,
    ShowcasePatch,
)
from portfolio.core.slug import generate_slug, is_valid_slug

__all__ = [
    # Locales
    "Locale",
    "DEFAULT_LOCALE",
    "get_locale",
    # Slugs
    "generate_slug",
    "is_valid_slug",
    # Models
    "Category",
    "LocalizedContent",
    "LocalizedPatch",
    "ShowcaseItem",
    "ShowcaseDraft",
    "ShowcasePatch",
    # Errors
    "ShowcaseError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "AssistError",
    "RateLimitError",
    "UpstreamError",
    "EmptyResponseError",
]
