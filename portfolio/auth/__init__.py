"""
Authorization - token-based identity for admin requests.
"""

from portfolio.auth.context import AuthContext
from portfolio.auth.jwt import (
    TokenError,
    TokenExpiredError,
    TokenInvalidError,
    TokenPayload,
    create_access_token,
    decode_token,
)
from portfolio.auth.policies import get_auth_context, require_auth

__all__ = [
    "AuthContext",
    "get_auth_context",
    "require_auth",
    "TokenPayload",
    "TokenError",
    "TokenExpiredError",
    "TokenInvalidError",
    "create_access_token",
    "decode_token",
]
