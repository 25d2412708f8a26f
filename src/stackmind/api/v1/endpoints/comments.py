# src/stackmind/api/v1/endpoints/comments.py
"""Comment endpoints."""

from typing import Any

from fastapi import APIRouter, Query, status

from stackmind.api.v1.dependencies import CurrentIdentityDep, StoreDep
from stackmind.db.documents import serialize, serialize_many
from stackmind.schemas.comment import CommentCreate, CommentResponse
from stackmind.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
def list_comments(
    store: StoreDep,
    postId: str | None = Query(None, description="Post whose comments to list"),
) -> list[dict[str, Any]]:
    return serialize_many(comment_service.list_comments(store=store, post_id=postId))


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def add_comment(
    payload: CommentCreate,
    store: StoreDep,
    identity: CurrentIdentityDep,
) -> dict[str, Any] | None:
    """Add a comment as the session identity."""
    return serialize(comment_service.add_comment(store=store, payload=payload, identity=identity))
