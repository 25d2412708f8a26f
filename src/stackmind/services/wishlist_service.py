"""Wishlist operations scoped to the authenticated identity."""
from __future__ import annotations

import logging
from typing import Any

from stackmind.core.errors import ConflictError, NotFoundError
from stackmind.core.security import Identity
from stackmind.db.documents import object_id, utcnow
from stackmind.db.store import BlogStore
from stackmind.repositories.wishlist_repo import WishlistRepository
from stackmind.services.authorization import ensure_same_identity
from stackmind.services.post_service import summarize_posts

logger = logging.getLogger(__name__)


def add_entry(*, store: BlogStore, post_id: str, identity: Identity) -> dict[str, Any]:
    """Save ``post_id`` to the caller's wishlist.

    The existence check and the insert are two separate store calls, so two
    concurrent adds for the same pair can both succeed.

    Raises:
        BadRequestError: If ``post_id`` is malformed.
        ConflictError: If the caller already saved this post.
    """
    oid = object_id(post_id, field="postId")
    repo = WishlistRepository(store)
    if repo.find(oid, identity.email) is not None:
        logger.info("Duplicate wishlist entry for post %s by %s", post_id, identity.email)
        raise ConflictError("Post already in wishlist")
    return repo.insert({"postId": oid, "userEmail": identity.email, "addedAt": utcnow()})


def remove_entry(
    *, store: BlogStore, post_id: str, caller_email: str | None, identity: Identity
) -> None:
    """Remove a post from the caller's wishlist.

    Raises:
        ForbiddenError: If ``caller_email`` is not the caller's identity.
        NotFoundError: If the caller has no entry for ``post_id``.
    """
    ensure_same_identity(identity, caller_email, message="Unauthorized to remove from wishlist")
    oid = object_id(post_id)
    if WishlistRepository(store).delete(oid, identity.email) == 0:
        raise NotFoundError("Post not found in wishlist")


def list_entries(*, store: BlogStore, email: str, identity: Identity) -> list[dict[str, Any]]:
    """Return the posts saved by the caller, newest post first.

    Raises:
        ForbiddenError: If ``email`` is not the caller's identity.
    """
    ensure_same_identity(identity, email, message="Unauthorized to access wishlist")
    post_ids = WishlistRepository(store).post_ids_for(identity.email)
    logger.debug("Wishlist for %s references %d posts", identity.email, len(post_ids))
    return summarize_posts(store=store, post_ids=post_ids)
