"""Comment creation and listing."""
from __future__ import annotations

from typing import Any

from stackmind.core.errors import BadRequestError
from stackmind.core.security import Identity
from stackmind.db.documents import utcnow
from stackmind.db.store import BlogStore
from stackmind.repositories.comment_repo import CommentRepository
from stackmind.schemas.comment import CommentCreate


def add_comment(*, store: BlogStore, payload: CommentCreate, identity: Identity) -> dict[str, Any]:
    """Append a comment authored by ``identity``."""
    doc = payload.model_dump(exclude_none=True)
    doc["authorEmail"] = identity.email
    doc["createdAt"] = utcnow()
    return CommentRepository(store).insert(doc)


def list_comments(*, store: BlogStore, post_id: str | None) -> list[dict[str, Any]]:
    """Return the comments of ``post_id``, newest first.

    Raises:
        BadRequestError: If ``post_id`` is missing or blank.
    """
    if not post_id or not post_id.strip():
        raise BadRequestError("Post ID is required")
    return CommentRepository(store).list_for_post(post_id.strip())
