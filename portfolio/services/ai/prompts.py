"""
Prompt templates for the content-assist actions.

Each builder returns the full instruction text sent to the model.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from portfolio.core.locales import Locale


class ContentField(str, Enum):
    """Item field the model can suggest content for."""
    
    TITLE = "title"
    DESCRIPTION = "description"


class SuggestContext(BaseModel):
    """What is already known about the item being edited."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    existing_title: str = Field(default="", alias="existingTitle")
    existing_description: str = Field(default="", alias="existingDescription")
    categories: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    
    def describe(self) -> str:
        """Context lines for the prompt (empty when nothing is known)."""
        lines = []
        if self.existing_title:
            lines.append(f"Current title: {self.existing_title}")
        if self.existing_description:
            lines.append(f"Current description: {self.existing_description}")
        if self.categories:
            lines.append(f"Categories: {', '.join(self.categories)}")
        if self.keywords:
            lines.append(f"Keywords: {', '.join(self.keywords)}")
        return "\n".join(lines)


def build_translate_prompt(text: str, from_locale: Locale, to_locale: Locale) -> str:
    return (
        f"Translate the following {from_locale.language_name} text to {to_locale.language_name}.\n"
        "Keep the same tone and style. Only respond with the translation, nothing else.\n"
        "\n"
        "Text to translate:\n"
        f"{text}"
    )


_TITLE_REQUIREMENTS = """Requirements:
- Keep it short (3-8 words)
- Make it catchy and descriptive
- Focus on the AI/technology aspect
- Only respond with the title, nothing else"""

_DESCRIPTION_REQUIREMENTS = """Requirements:
- 2-4 sentences
- Highlight the benefits and features
- Keep it engaging and informative
- Focus on what makes this AI solution valuable
- Only respond with the description, nothing else"""


def build_suggest_prompt(context: SuggestContext, field: ContentField, locale: Locale) -> str:
    """
    Build a suggestion prompt for one field.
    
    Titles are asked for as 3-8 words, descriptions as 2-4 sentences.
    Known context (title, description, categories, keywords) is included
    when present.
    """
    language = locale.language_name
    
    if field == ContentField.TITLE:
        intro = f"Generate a concise, professional {language} title for an AI project portfolio item."
        requirements = _TITLE_REQUIREMENTS
    else:
        intro = f"Generate a professional {language} description for an AI project portfolio item."
        requirements = _DESCRIPTION_REQUIREMENTS
    
    parts = [intro]
    context_info = context.describe()
    if context_info:
        parts.append(f"\nContext:\n{context_info}")
    parts.append(f"\n{requirements}")
    return "\n".join(parts)
