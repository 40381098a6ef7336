"""
Auth context - who is making the request.

The portfolio only distinguishes anonymous visitors from authenticated
admins. Anonymous callers never see private items.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AuthContext:
    """
    Identity for a request.
    
    Usage in routes:
        async def my_route(ctx: AuthContext = Depends(get_auth_context)):
            items = await store.list(include_private=ctx.is_authenticated)
    """
    
    user_email: str | None = None
    user_name: str | None = None
    
    @property
    def is_authenticated(self) -> bool:
        """Is there a logged-in user?"""
        return self.user_email is not None
    
    @property
    def is_anonymous(self) -> bool:
        """Is this an anonymous request?"""
        return self.user_email is None
    
    @classmethod
    def anonymous(cls) -> AuthContext:
        """Create an anonymous context (no user)."""
        return cls()
