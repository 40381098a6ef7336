"""
AI content assist using Gemini.

Two actions are offered to the editing UI: translating item text between
Dutch and English, and suggesting a title or description.
"""

from portfolio.services.ai.client import (
    GeminiClient,
    RateLimitSignal,
    compute_wait,
    parse_rate_limit,
)
from portfolio.services.ai.prompts import (
    ContentField,
    SuggestContext,
    build_suggest_prompt,
    build_translate_prompt,
)
from portfolio.services.ai.assist import AssistService

__all__ = [
    "GeminiClient",
    "RateLimitSignal",
    "compute_wait",
    "parse_rate_limit",
    "ContentField",
    "SuggestContext",
    "build_suggest_prompt",
    "build_translate_prompt",
    "AssistService",
]
