"""
Core data models for the portfolio backend.

A showcase item is the only entity: a portfolio entry with a title, slug
and description per locale, plus the legacy single-locale fields that
older records were written with.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from portfolio.core.locales import DEFAULT_LOCALE, Locale
from portfolio.core.utils import generate_id, utc_now


# =============================================================================
# Enums
# =============================================================================


class Category(str, Enum):
    """Kind of AI project a showcase item presents."""
    
    VOICE = "voice"
    CHAT = "chat"
    IMAGE = "image"
    VIDEO = "video"
    AUTOMATION = "automation"
    OTHER = "other"


# =============================================================================
# Legacy / flat field handling
# =============================================================================


# Flat keys used by the legacy single-locale model and by form posts
LEGACY_DEFAULT_FIELDS = {
    "title": "default_title",
    "slug": "default_slug",
    "description": "default_description",
}

LOCALIZED_FIELDS = ("title", "slug", "description")


def lift_flat_fields(data: Any) -> Any:
    """
    Lift flat ``title_nl`` / ``slug_en`` style keys into ``localized``.
    
    Also maps the bare ``title``, ``slug`` and ``description`` keys onto
    the ``default_*`` fields. Values given in ``localized`` win over flat
    ones; ``None`` values are dropped.
    """
    if not isinstance(data, dict):
        return data
    
    data = dict(data)
    
    for old_key, new_key in LEGACY_DEFAULT_FIELDS.items():
        if old_key in data:
            value = data.pop(old_key)
            if value is not None and new_key not in data:
                data[new_key] = value
    
    localized: dict[Locale, Any] = {
        Locale(key): value for key, value in (data.get("localized") or {}).items()
    }
    
    for locale in Locale:
        flat: dict[str, Any] = {}
        for name in LOCALIZED_FIELDS:
            key = f"{name}_{locale.value}"
            if key in data:
                value = data.pop(key)
                if value is not None:
                    flat[name] = value
        
        if not flat:
            continue
        
        current = localized.get(locale)
        if current is None:
            localized[locale] = flat
        elif isinstance(current, dict):
            localized[locale] = {**flat, **current}
    
    if localized:
        data["localized"] = localized
    return data


# =============================================================================
# Localized Content
# =============================================================================


class LocalizedContent(BaseModel):
    """Title, slug and description of an item in one locale."""
    
    title: str = ""
    slug: str = ""
    description: str = ""


class LocalizedPatch(BaseModel):
    """Partial update of one locale's content. ``None`` means unchanged."""
    
    title: str | None = None
    slug: str | None = None
    description: str | None = None


# =============================================================================
# Showcase Item
# =============================================================================


class ShowcaseItem(BaseModel):
    """
    A portfolio entry.
    
    ``localized`` holds the per-locale content. The ``default_*`` fields
    are the legacy single-locale values; by convention they mirror Dutch.
    Records written before the bilingual model may only have those.
    """
    
    id: str = Field(default_factory=generate_id)
    
    # Legacy single-locale fields
    default_title: str = ""
    default_slug: str = ""
    default_description: str = ""
    
    # Per-locale content
    localized: dict[Locale, LocalizedContent] = Field(default_factory=dict)
    
    # Presentation
    image_url: str = ""
    app_url: str = ""
    categories: list[Category] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    
    # Visibility
    is_public: bool = True
    
    # Provenance
    created_by: str = ""
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    
    @model_validator(mode="before")
    @classmethod
    def accept_flat_fields(cls, data: Any) -> Any:
        return lift_flat_fields(data)
    
    def slug_for(self, locale: Locale) -> str:
        """The slug in a locale's own namespace (no fallback)."""
        content = self.localized.get(locale)
        return content.slug if content else ""
    
    def content_for(self, locale: Locale) -> LocalizedContent:
        """
        Localized view of the item.
        
        Missing fields fall back to the legacy default fields.
        """
        content = self.localized.get(locale) or LocalizedContent()
        return LocalizedContent(
            title=content.title or self.default_title,
            slug=content.slug or self.default_slug,
            description=content.description or self.default_description,
        )
    
    def to_record(self) -> dict[str, Any]:
        """Serialize for storage."""
        return self.model_dump(mode="json")


# =============================================================================
# Create / Update Payloads
# =============================================================================


class ShowcaseDraft(BaseModel):
    """
    Data for creating an item.
    
    Both locales need a title and a description. An empty slug is derived
    from the locale's title. Empty ``default_*`` fields mirror the Dutch
    locale.
    """
    
    localized: dict[Locale, LocalizedContent] = Field(default_factory=dict)
    
    default_title: str = ""
    default_slug: str = ""
    default_description: str = ""
    
    image_url: str = ""
    app_url: str = ""
    categories: list[Category] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    is_public: bool = True
    
    @model_validator(mode="before")
    @classmethod
    def accept_flat_fields(cls, data: Any) -> Any:
        return lift_flat_fields(data)
    
    def content_for(self, locale: Locale) -> LocalizedContent:
        return self.localized.get(locale) or LocalizedContent()


class ShowcasePatch(BaseModel):
    """Partial update. Fields left as ``None`` are not touched."""
    
    localized: dict[Locale, LocalizedPatch] = Field(default_factory=dict)
    
    default_title: str | None = None
    default_slug: str | None = None
    default_description: str | None = None
    
    image_url: str | None = None
    app_url: str | None = None
    categories: list[Category] | None = None
    keywords: list[str] | None = None
    is_public: bool | None = None
    
    @model_validator(mode="before")
    @classmethod
    def accept_flat_fields(cls, data: Any) -> Any:
        return lift_flat_fields(data)
    
    def scalar_updates(self) -> dict[str, Any]:
        """Non-localized fields that were provided."""
        return {
            key: value
            for key, value in self.model_dump(exclude={"localized"}).items()
            if value is not None
        }
    
    def slug_updates(self) -> dict[Locale, str]:
        """Locale slugs that were provided."""
        return {
            locale: patch.slug
            for locale, patch in self.localized.items()
            if patch.slug is not None
        }


def mirror_default_fields(draft: ShowcaseDraft, slugs: dict[Locale, str]) -> dict[str, str]:
    """Legacy default fields for a new item, mirroring the default locale."""
    content = draft.content_for(DEFAULT_LOCALE)
    return {
        "default_title": draft.default_title or content.title,
        "default_slug": draft.default_slug or slugs[DEFAULT_LOCALE],
        "default_description": draft.default_description or content.description,
    }
