"""Shared API dependencies for authentication and store access."""

from typing import Annotated

from fastapi import Depends, Request

from stackmind.core.security import Identity, verify_token
from stackmind.core.settings import settings
from stackmind.db.store import BlogStore, get_store

# Type alias for the store dependency
StoreDep = Annotated[BlogStore, Depends(get_store)]


def get_current_identity(request: Request) -> Identity:
    """Return the verified identity carried by the session cookie.

    Args:
        request: Incoming request holding the session cookie

    Returns:
        Identity asserted by the token

    Raises:
        UnauthorizedError: If the cookie is absent or the token does not verify
    """
    return verify_token(request.cookies.get(settings.session_cookie_name))


# Type alias for current identity dependency
CurrentIdentityDep = Annotated[Identity, Depends(get_current_identity)]
