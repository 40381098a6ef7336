"""
Services: the showcase content store, the AI assist pipeline and the sitemap.
"""

from portfolio.services.showcase import ShowcaseStore
from portfolio.services.sitemap import SitemapEntry, build_sitemap
from portfolio.services.ai import AssistService, GeminiClient

__all__ = [
    "ShowcaseStore",
    "SitemapEntry",
    "build_sitemap",
    "AssistService",
    "GeminiClient",
]
