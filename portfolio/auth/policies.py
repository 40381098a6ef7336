"""
Policies - FastAPI dependencies for route authorization.

    ctx: AuthContext = Depends(get_auth_context)  # anonymous allowed
    ctx: AuthContext = Depends(require_auth)      # 401 when anonymous
"""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio.auth.context import AuthContext
from portfolio.auth.jwt import TokenError, decode_token
from portfolio.config import get_settings

logger = logging.getLogger(__name__)


# Optional JWT bearer (doesn't fail if no token)
optional_bearer = HTTPBearer(auto_error=False)


async def get_auth_context(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(optional_bearer),
) -> AuthContext:
    """
    Resolve the caller from a bearer token or the auth cookie.
    
    A missing, expired or invalid token yields an anonymous context.
    """
    settings = get_settings()
    token = credentials.credentials if credentials else request.cookies.get(settings.auth_cookie_name)
    if not token:
        return AuthContext.anonymous()
    
    try:
        payload = decode_token(token, expected_type="access", settings=settings)
    except TokenError as e:
        logger.info("Rejected auth token: %s", e)
        return AuthContext.anonymous()
    
    return AuthContext(user_email=payload.sub, user_name=payload.name or None)


async def require_auth(ctx: AuthContext = Depends(get_auth_context)) -> AuthContext:
    """Require an authenticated caller."""
    if ctx.is_anonymous:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return ctx
