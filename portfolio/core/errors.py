"""
Error taxonomy.

Every failure the store or the AI assist client reports is one of these
exceptions. Each carries a stable ``kind`` and the HTTP status the API
layer answers with, plus any structured details the UI needs.
"""

from __future__ import annotations

from typing import Any

from portfolio.core.locales import Locale


class ShowcaseError(Exception):
    """Base exception for all domain errors."""
    
    kind = "error"
    status_code = 500
    public_message: str | None = None  # shown to API callers instead of message
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
    
    def to_dict(self) -> dict[str, Any]:
        """Payload for API error responses."""
        return {"error": self.public_message or self.message, "kind": self.kind}


# =============================================================================
# Content Store Errors
# =============================================================================


class ValidationError(ShowcaseError):
    """Malformed slug or missing required field. Caller-correctable."""
    
    kind = "validation"
    status_code = 400
    
    def __init__(
        self,
        message: str,
        field: str | None = None,
        locale: Locale | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.locale = locale
    
    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.field:
            data["field"] = self.field
        if self.locale:
            data["locale"] = self.locale.value
        return data


class ConflictError(ShowcaseError):
    """Slug already taken in a locale namespace."""
    
    kind = "conflict"
    status_code = 409
    
    def __init__(self, message: str, slug: str, locale: Locale | None = None):
        super().__init__(message)
        self.slug = slug
        self.locale = locale
    
    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["slug"] = self.slug
        data["locale"] = self.locale.value if self.locale else None
        return data


class NotFoundError(ShowcaseError):
    """Item does not exist, or is private and the caller is anonymous."""
    
    kind = "not_found"
    status_code = 404
    
    def __init__(self, message: str = "Item not found"):
        super().__init__(message)


# =============================================================================
# AI Assist Errors
# =============================================================================


class AssistError(ShowcaseError):
    """Base exception for AI assist failures."""
    
    kind = "assist"
    status_code = 502


class RateLimitError(AssistError):
    """
    Backend quota exhausted.
    
    ``retry_after`` is the suggested wait in seconds. Raised per attempt
    inside the client's retry loop, and surfaced to callers once the
    attempts are used up.
    """
    
    kind = "rate_limited"
    status_code = 429
    
    def __init__(
        self,
        message: str = "Rate limit exceeded. Please wait a moment and try again.",
        retry_after: float = 0.0,
    ):
        super().__init__(message)
        self.retry_after = retry_after
    
    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["retry_after"] = self.retry_after
        return data


class UpstreamError(AssistError):
    """Backend failed for a reason other than rate limiting."""
    
    kind = "upstream"
    public_message = "The AI service failed. Please try again."


class EmptyResponseError(AssistError):
    """Backend answered successfully but without usable text."""
    
    kind = "empty_response"
    public_message = "The AI service returned nothing usable. Please try again."
    
    def __init__(self, message: str = "No response from AI backend"):
        super().__init__(message)
