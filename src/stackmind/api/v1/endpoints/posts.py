# src/stackmind/api/v1/endpoints/posts.py
"""Post-related endpoints for the StackMind API."""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from stackmind.api.v1.dependencies import CurrentIdentityDep, StoreDep
from stackmind.core.settings import settings
from stackmind.db.documents import serialize, serialize_many
from stackmind.repositories.post_repo import PostRepository
from stackmind.schemas.post import (
    PostCreate,
    PostResponse,
    PostSummary,
    PostUpdateResponse,
)
from stackmind.services import post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
def list_posts(
    store: StoreDep,
    category: str | None = Query(None, description="Exact category to filter by"),
    search: str | None = Query(None, description="Full-text search over titles"),
) -> list[dict[str, Any]]:
    """List posts newest first with optional category and text filters."""
    posts = PostRepository(store).list_posts(category=category, search=search)
    return serialize_many(posts)


@router.get("/recent", response_model=list[PostResponse])
def recent_posts(store: StoreDep) -> list[dict[str, Any]]:
    """Return the most recently created posts."""
    return serialize_many(PostRepository(store).recent(settings.recent_posts_limit))


@router.get("/featured", response_model=list[PostSummary])
def featured_posts(store: StoreDep) -> list[dict[str, Any]]:
    """Return the posts with the highest description word counts."""
    posts = post_service.featured_posts(store=store, limit=settings.featured_posts_limit)
    return serialize_many(posts)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: str, store: StoreDep) -> dict[str, Any] | None:
    """Return a single post by identifier."""
    return serialize(post_service.get_post(store=store, post_id=post_id))


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    store: StoreDep,
    identity: CurrentIdentityDep,
) -> dict[str, Any] | None:
    """Create a post owned by the caller."""
    post = post_service.create_post(store=store, payload=payload, identity=identity)
    return serialize(post)


@router.patch("/{post_id}", response_model=PostUpdateResponse)
def update_post(
    post_id: str,
    store: StoreDep,
    identity: CurrentIdentityDep,
    email: str | None = Query(None, description="Email the caller acts as"),
    payload: Any = Body(None, description="Partial post; see PostUpdate"),
) -> dict[str, Any]:
    """Update a post owned by the caller.

    Both ``email`` and the stored owner must equal the session identity. The
    body is validated against :class:`PostUpdate` only after those checks, so
    a caller who may not edit the post always gets 403.
    """
    post = post_service.update_post(
        store=store,
        post_id=post_id,
        payload=payload,
        caller_email=email,
        identity=identity,
    )
    return {"message": "Post updated successfully", "post": serialize(post)}
