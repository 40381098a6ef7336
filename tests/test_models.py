"""
Tests for the showcase item model and its legacy record handling.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from portfolio.core.locales import Locale, get_locale
from portfolio.core.models import (
    Category,
    LocalizedContent,
    ShowcaseDraft,
    ShowcaseItem,
    ShowcasePatch,
)


# =============================================================================
# Locale
# =============================================================================


class TestLocale:
    def test_other(self):
        assert Locale.NL.other == Locale.EN
        assert Locale.EN.other == Locale.NL

    def test_language_names(self):
        assert Locale.NL.language_name == "Dutch"
        assert Locale.EN.language_name == "English"

    def test_get_locale(self):
        assert get_locale("nl") == Locale.NL
        assert get_locale("EN-gb") == Locale.EN
        assert get_locale("Dutch") == Locale.NL
        assert get_locale("de") is None
        assert get_locale(None) is None


# =============================================================================
# ShowcaseItem
# =============================================================================


class TestShowcaseItem:
    def test_lifts_flat_legacy_record(self):
        item = ShowcaseItem.model_validate({
            "id": "legacy1",
            "title": "Oude Titel",
            "slug": "oude-titel",
            "description": "Oud",
            "title_en": "Old Title",
            "slug_en": "old-title",
            "is_public": True,
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-01T00:00:00Z",
        })

        assert item.default_slug == "oude-titel"
        assert item.default_title == "Oude Titel"
        assert item.slug_for(Locale.EN) == "old-title"
        assert item.slug_for(Locale.NL) == ""
        assert item.localized[Locale.EN].title == "Old Title"

    def test_nested_localized_wins_over_flat(self):
        item = ShowcaseItem.model_validate({
            "slug_en": "flat",
            "localized": {"en": {"slug": "nested"}},
        })
        assert item.slug_for(Locale.EN) == "nested"

    def test_content_for_falls_back_to_defaults(self):
        item = ShowcaseItem(
            default_title="Stem AI",
            default_slug="stem-ai",
            default_description="Beschrijving",
            localized={Locale.EN: LocalizedContent(title="Voice AI")},
        )

        en = item.content_for(Locale.EN)
        assert en.title == "Voice AI"
        assert en.slug == "stem-ai"
        assert en.description == "Beschrijving"

        nl = item.content_for(Locale.NL)
        assert nl.title == "Stem AI"

    def test_record_round_trip_keeps_locale_keys(self):
        item = ShowcaseItem(
            localized={Locale.NL: LocalizedContent(title="A", slug="aa", description="x")},
            categories=[Category.VOICE],
        )
        record = item.to_record()

        assert record["localized"]["nl"]["slug"] == "aa"
        assert record["categories"] == ["voice"]
        assert ShowcaseItem.model_validate(record) == item

    def test_unknown_locale_rejected(self):
        with pytest.raises(PydanticValidationError):
            ShowcaseItem.model_validate({"localized": {"de": {"title": "x"}}})


# =============================================================================
# Draft / Patch
# =============================================================================


class TestPayloads:
    def test_draft_accepts_flat_form_fields(self):
        draft = ShowcaseDraft(
            title_nl="Stem AI",
            title_en="Voice AI",
            slug_en="",
            description_nl="nl",
            description_en="en",
        )

        assert draft.content_for(Locale.NL).title == "Stem AI"
        assert draft.content_for(Locale.EN).slug == ""

    def test_patch_tracks_only_provided_fields(self):
        patch = ShowcasePatch(description_en="New text", is_public=False)

        assert patch.scalar_updates() == {"is_public": False}
        assert patch.slug_updates() == {}
        assert patch.localized[Locale.EN].description == "New text"
        assert patch.localized[Locale.EN].title is None

    def test_patch_slug_updates(self):
        patch = ShowcasePatch(slug_nl="nieuw", localized={"en": {"slug": "new"}})
        assert patch.slug_updates() == {Locale.NL: "nieuw", Locale.EN: "new"}
