"""Service-level helpers for posts and the derived word-count views."""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from stackmind.core.errors import BadRequestError, NotFoundError
from stackmind.core.security import Identity
from stackmind.db.documents import object_id, utcnow
from stackmind.db.store import BlogStore
from stackmind.repositories.post_repo import MUTABLE_POST_FIELDS, PostRepository
from stackmind.schemas.post import PostCreate, PostUpdate
from stackmind.services.authorization import ensure_owner, ensure_same_identity
from stackmind.services.text import count_words

logger = logging.getLogger(__name__)

UPDATE_FORBIDDEN = "You are not authorized to update this post"


def _parse_patch(payload: PostUpdate | dict[str, Any] | None) -> PostUpdate:
    if isinstance(payload, PostUpdate):
        return payload
    try:
        return PostUpdate.model_validate(payload if payload is not None else {})
    except ValidationError as err:
        first = err.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", "invalid value")
        raise BadRequestError(f"{location}: {message}" if location else message) from err


def create_post(*, store: BlogStore, payload: PostCreate, identity: Identity) -> dict[str, Any]:
    """Persist a new post owned by ``identity``.

    Returns:
        The stored document including its generated ``_id``.
    """
    doc = payload.model_dump(exclude_none=True)
    doc["email"] = identity.email
    doc["createdAt"] = utcnow()
    post = PostRepository(store).insert(doc)
    logger.info("Post %s created by %s", post["_id"], identity.email)
    return post


def update_post(
    *,
    store: BlogStore,
    post_id: str,
    payload: PostUpdate | dict[str, Any] | None,
    caller_email: str | None,
    identity: Identity,
) -> dict[str, Any]:
    """Apply an owner's patch to a post.

    Args:
        store: Store handle.
        post_id: Hex identifier from the request path.
        payload: Patch body, validated as :class:`PostUpdate` once the caller
            is known to own the post; only :data:`MUTABLE_POST_FIELDS` apply.
        caller_email: Email the request claims to act as (query parameter).
        identity: Verified session identity.

    Returns:
        The post as stored after the update.

    Raises:
        ForbiddenError: If ``caller_email`` is not the caller's identity or the
            post is owned by someone else.
        NotFoundError: If no post has ``post_id``.
        BadRequestError: If ``post_id`` is malformed or the patch is invalid or
            empty.
    """
    ensure_same_identity(identity, caller_email, message=UPDATE_FORBIDDEN)
    oid = object_id(post_id)

    repo = PostRepository(store)
    post = repo.get(oid)
    if post is None:
        raise NotFoundError("Post not found")
    ensure_owner(identity, post.get("email"), message=UPDATE_FORBIDDEN)

    patch = _parse_patch(payload).model_dump(exclude_unset=True, exclude_none=True)
    if not any(key in patch for key in MUTABLE_POST_FIELDS):
        raise BadRequestError("No updatable fields supplied")

    result = repo.update_fields(oid, patch)
    if result.matched_count == 0:
        raise NotFoundError("Post not found")
    updated = repo.get(oid)
    if updated is None:
        raise NotFoundError("Post not found")
    return updated


def get_post(*, store: BlogStore, post_id: str) -> dict[str, Any]:
    """Return a single post; malformed and unknown ids both read as absent."""
    try:
        oid = object_id(post_id)
    except BadRequestError as err:
        raise NotFoundError("Post not found") from err
    post = PostRepository(store).get(oid)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def with_word_count(post: dict[str, Any]) -> dict[str, Any]:
    """Return the summary projection of ``post`` with its ``wordCount``."""
    return {
        "_id": post["_id"],
        "title": post.get("title"),
        "category": post.get("category"),
        "name": post.get("name"),
        "createdAt": post.get("createdAt"),
        "wordCount": count_words(post.get("longDescription")),
    }


def featured_posts(*, store: BlogStore, limit: int) -> list[dict[str, Any]]:
    """Return the ``limit`` posts with the longest descriptions.

    ``sorted`` is stable, so posts with equal word counts keep the store's
    natural order.
    """
    summaries = [with_word_count(post) for post in PostRepository(store).summaries()]
    summaries.sort(key=lambda post: post["wordCount"], reverse=True)
    return summaries[:limit]


def _created_at_key(post: dict[str, Any]) -> tuple[bool, Any]:
    created_at = post.get("createdAt")
    return (created_at is not None, created_at)


def summarize_posts(*, store: BlogStore, post_ids: list[Any]) -> list[dict[str, Any]]:
    """Return summaries of ``post_ids`` ordered by ``createdAt`` descending."""
    if not post_ids:
        return []
    summaries = [with_word_count(post) for post in PostRepository(store).summaries(post_ids)]
    summaries.sort(key=_created_at_key, reverse=True)
    return summaries
