"""
Portfolio - bilingual showcase backend with AI content assist.

Showcase items carry a title, slug and description per locale (Dutch and
English). Slugs are unique within each locale's namespace and resolve
with a fallback to the legacy single-locale slug and the other locale.
"""

__version__ = "0.1.0"
