"""
Content assist - translation and suggestions for the editing UI.
"""

from __future__ import annotations

import logging

from portfolio.core.locales import Locale
from portfolio.services.ai.client import GeminiClient
from portfolio.services.ai.prompts import (
    ContentField,
    SuggestContext,
    build_suggest_prompt,
    build_translate_prompt,
)

logger = logging.getLogger(__name__)


class AssistService:
    """
    Translate and suggest item content through the Gemini client.
    
    Usage:
        assist = AssistService(GeminiClient.from_settings(settings))
        
        title_en = await assist.translate("Stem AI", Locale.NL, Locale.EN)
        
        description = await assist.suggest(
            SuggestContext(existing_title="Voice AI", categories=["voice"]),
            ContentField.DESCRIPTION,
            Locale.EN,
        )
    
    Failures surface as RateLimitError, UpstreamError or EmptyResponseError.
    """
    
    def __init__(self, client: GeminiClient):
        self.client = client
    
    async def translate(self, text: str, from_locale: Locale, to_locale: Locale) -> str:
        """Translate text between the site locales. Blank input returns ""."""
        if not text or not text.strip():
            return ""
        
        from_locale, to_locale = Locale(from_locale), Locale(to_locale)
        logger.debug("Translating %d chars %s -> %s", len(text), from_locale.value, to_locale.value)
        return await self.client.generate(build_translate_prompt(text, from_locale, to_locale))
    
    async def suggest(
        self,
        context: SuggestContext | None,
        field: ContentField,
        locale: Locale,
    ) -> str:
        """Suggest a title or description in the given locale."""
        prompt = build_suggest_prompt(
            context or SuggestContext(),
            ContentField(field),
            Locale(locale),
        )
        return await self.client.generate(prompt)
