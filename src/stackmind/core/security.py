"""Session token issuing, verification and cookie transport."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from fastapi import Response
from jose import JWTError, jwt

from stackmind.core.errors import UnauthorizedError
from stackmind.core.settings import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Verified caller identity carried by a session token."""

    email: str


def issue_token(identity: Identity, *, now: datetime | None = None) -> str:
    """Create a signed session token for ``identity``.

    Args:
        identity: Caller identity whose email becomes the token claim.
        now: Issue time override, used by tests to mint expired tokens.

    Returns:
        Encoded JWT valid for ``ACCESS_TOKEN_EXPIRE_DAYS`` days.
    """
    issued_at = now or datetime.now(UTC)
    claims: dict[str, object] = {
        "sub": identity.email,
        "email": identity.email,
        "iat": int(issued_at.timestamp()),
        "exp": issued_at + timedelta(days=settings.access_token_expire_days),
    }
    encoded: str = jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)
    return encoded


def verify_token(token: str | None) -> Identity:
    """Return the identity asserted by ``token``.

    Raises:
        UnauthorizedError: If the token is missing, malformed, expired, signed
            with another key, or does not carry an email claim.
    """
    if not token:
        raise UnauthorizedError("No token provided, authorization denied")
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        logger.debug("Rejected session token: %s", err)
        raise UnauthorizedError("Invalid or expired token") from err

    email = payload.get("email")
    if not isinstance(email, str) or not email:
        raise UnauthorizedError("Invalid or expired token")
    return Identity(email=email)


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token to ``response`` as an HTTP-only cookie."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,  # type: ignore[arg-type]
    )


def clear_session_cookie(response: Response) -> None:
    """Expire the session cookie on the client.

    Tokens are stateless, so a copy of the token captured elsewhere stays
    valid until its ``exp`` claim passes.
    """
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,  # type: ignore[arg-type]
    )
