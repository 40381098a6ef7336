"""
Shared fixtures.
"""

import pytest

from portfolio.core.models import ShowcaseDraft
from portfolio.services.showcase import ShowcaseStore
from portfolio.storage import InMemoryItemStorage


@pytest.fixture
def storage():
    """Fresh in-memory item storage."""
    return InMemoryItemStorage()


@pytest.fixture
def store(storage):
    """Showcase store over the in-memory storage."""
    return ShowcaseStore(storage)


@pytest.fixture
def make_draft():
    """Build a draft with both locales filled in; keyword args override."""
    def _make(**overrides):
        fields = {
            "title_nl": "Stem AI",
            "title_en": "Voice AI",
            "description_nl": "Een slimme spraakassistent.",
            "description_en": "A smart voice assistant.",
            "app_url": "https://example.com/voice",
        }
        fields.update(overrides)
        return ShowcaseDraft(**fields)
    return _make
