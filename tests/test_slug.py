"""
Tests for slug generation and validation.
"""

import pytest

from portfolio.core.slug import generate_slug, is_valid_slug


SAMPLE_TITLES = [
    "Café Müller!!",
    "Stem AI",
    "  Voice   AI -- Demo ",
    "---leading and trailing---",
    "Ünïcödé Çhäräctérs",
    "Tabs\tand\nnewlines",
    "Already-a-slug",
    "100% AI-powered (beta)",
    "!!!",
    "",
    "a",
    "Crème brûlée — deluxe",
]


# =============================================================================
# generate_slug
# =============================================================================


class TestGenerateSlug:
    def test_folds_accents_and_drops_punctuation(self):
        assert generate_slug("Café Müller!!") == "cafe-muller"

    def test_simple_title(self):
        assert generate_slug("Stem AI") == "stem-ai"
        assert generate_slug("Voice AI") == "voice-ai"

    def test_collapses_whitespace_and_hyphens(self):
        assert generate_slug("  Voice   AI -- Demo ") == "voice-ai-demo"
        assert generate_slug("a - - b") == "a-b"

    def test_trims_hyphens(self):
        assert generate_slug("---leading and trailing---") == "leading-and-trailing"

    def test_keeps_digits(self):
        assert generate_slug("100% AI-powered (beta)") == "100-ai-powered-beta"

    def test_nothing_usable_gives_empty_string(self):
        assert generate_slug("!!!") == ""
        assert generate_slug("") == ""
        assert generate_slug("日本語") == ""

    @pytest.mark.parametrize("title", SAMPLE_TITLES)
    def test_idempotent(self, title):
        once = generate_slug(title)
        assert generate_slug(once) == once

    @pytest.mark.parametrize("title", SAMPLE_TITLES)
    def test_output_is_valid_when_long_enough(self, title):
        slug = generate_slug(title)
        if len(slug) >= 2:
            assert is_valid_slug(slug)


# =============================================================================
# is_valid_slug
# =============================================================================


class TestIsValidSlug:
    @pytest.mark.parametrize("slug", ["ab", "voice-ai", "a1-b2-c3", "2024"])
    def test_valid(self, slug):
        assert is_valid_slug(slug)

    @pytest.mark.parametrize("slug", [
        "",
        "a",
        "-voice",
        "voice-",
        "voice--ai",
        "Voice-AI",
        "voice ai",
        "voice_ai",
        "café",
    ])
    def test_invalid(self, slug):
        assert not is_valid_slug(slug)
