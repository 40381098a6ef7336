# =============================================================================
# JWT Tokens
# =============================================================================
#
# Admin requests carry a signed access token, either as a bearer token or
# in the auth cookie. This module creates and validates those tokens.
# Issuing the cookie (login) happens outside this service.
#
# =============================================================================

from datetime import datetime, timedelta, timezone
import logging

from pydantic import BaseModel
import jwt

from portfolio.config import Settings, get_settings
from portfolio.core.utils import generate_id, utc_now

logger = logging.getLogger(__name__)


# =============================================================================
# Models
# =============================================================================

class TokenPayload(BaseModel):
    """JWT token payload."""
    sub: str  # user email
    name: str = ""
    exp: datetime
    iat: datetime
    type: str  # "access"
    jti: str  # unique token ID


# =============================================================================
# Token Creation
# =============================================================================

def create_access_token(
    email: str,
    name: str = "",
    settings: Settings | None = None,
) -> str:
    """Create a JWT access token for an admin user."""
    settings = settings or get_settings()
    now = utc_now()
    expire = now + timedelta(days=settings.jwt_access_token_expire_days)
    
    payload = {
        "sub": email,
        "name": name,
        "exp": expire,
        "iat": now,
        "type": "access",
        "jti": generate_id("tok"),
    }
    
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


# =============================================================================
# Token Validation
# =============================================================================

class TokenError(Exception):
    """Base exception for token errors."""
    pass


class TokenExpiredError(TokenError):
    """Token has expired."""
    pass


class TokenInvalidError(TokenError):
    """Token is invalid or malformed."""
    pass


def decode_token(
    token: str,
    expected_type: str = "access",
    settings: Settings | None = None,
) -> TokenPayload:
    """
    Decode and validate a JWT token.
    
    Tokens issued by the site's login carry the admin's address in an
    ``email`` claim and no ``type``; those are accepted as access tokens.
    
    Raises:
        TokenExpiredError: Token has expired
        TokenInvalidError: Token is invalid
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid token: {e}")
    
    token_type = payload.get("type", "access")
    if token_type != expected_type:
        raise TokenInvalidError(f"Expected {expected_type} token, got {token_type}")
    
    subject = payload.get("sub") or payload.get("email")
    if not subject or not isinstance(subject, str):
        raise TokenInvalidError("Token has no subject")
    
    return TokenPayload(
        sub=subject,
        name=str(payload.get("name") or ""),
        exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
        type=token_type,
        jti=str(payload.get("jti") or ""),
    )
