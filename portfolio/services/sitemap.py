"""
Sitemap entries for public showcase pages.

Every public item gets one project page per locale, addressed by that
locale's slug (or the legacy default slug for older records).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from portfolio.core.locales import Locale
from portfolio.core.models import ShowcaseItem
from portfolio.core.utils import utc_now


class SitemapEntry(BaseModel):
    url: str
    last_modified: datetime
    change_frequency: str
    priority: float


def project_path(locale: Locale, slug: str) -> str:
    return f"/{locale.value}/project/{slug}"


def build_sitemap(
    items: list[ShowcaseItem],
    base_url: str,
    now: datetime | None = None,
) -> list[SitemapEntry]:
    """Build sitemap entries: locale home pages, then project pages."""
    base_url = base_url.rstrip("/")
    now = now or utc_now()
    
    entries = [
        SitemapEntry(
            url=f"{base_url}/{locale.value}",
            last_modified=now,
            change_frequency="weekly",
            priority=1.0,
        )
        for locale in Locale
    ]
    
    for item in items:
        if not item.is_public:
            continue
        for locale in Locale:
            slug = item.slug_for(locale) or item.default_slug
            if not slug:
                continue
            entries.append(SitemapEntry(
                url=f"{base_url}{project_path(locale, slug)}",
                last_modified=item.updated_at,
                change_frequency="monthly",
                priority=0.8,
            ))
    
    return entries
