"""Resource ownership checks.

The authorization guard only proves who the caller is. Every mutating
operation still has to compare that identity with the owner recorded on the
resource (or claimed in the request) using exact, case-sensitive equality.
"""
from __future__ import annotations

import logging

from stackmind.core.errors import ForbiddenError
from stackmind.core.security import Identity

logger = logging.getLogger(__name__)


def ensure_same_identity(identity: Identity, claimed_email: str | None, *, message: str) -> None:
    """Require the email named by the request to be the caller's own.

    Raises:
        ForbiddenError: If ``claimed_email`` is missing or differs from the caller.
    """
    if claimed_email is None or claimed_email != identity.email:
        logger.info(
            "Ownership check failed: caller=%s claimed=%s", identity.email, claimed_email
        )
        raise ForbiddenError(message)


def ensure_owner(identity: Identity, owner_email: object, *, message: str) -> None:
    """Require the stored owner of a resource to be the caller.

    Raises:
        ForbiddenError: If the resource has no owner or it differs from the caller.
    """
    if not isinstance(owner_email, str) or owner_email != identity.email:
        logger.info("Owner mismatch: caller=%s owner=%s", identity.email, owner_email)
        raise ForbiddenError(message)
