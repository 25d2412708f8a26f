# src/stackmind/api/v1/endpoints/wishlist.py
"""Wishlist endpoints. Every route requires a session."""

from typing import Any

from fastapi import APIRouter, Query, status

from stackmind.api.v1.dependencies import CurrentIdentityDep, StoreDep
from stackmind.db.documents import serialize, serialize_many
from stackmind.schemas.common import MessageResponse
from stackmind.schemas.post import PostSummary
from stackmind.schemas.wishlist import WishlistCreate, WishlistEntryResponse
from stackmind.services import wishlist_service

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.post("", response_model=WishlistEntryResponse, status_code=status.HTTP_201_CREATED)
def add_to_wishlist(
    payload: WishlistCreate,
    store: StoreDep,
    identity: CurrentIdentityDep,
) -> dict[str, Any] | None:
    """Save a post to the caller's wishlist."""
    entry = wishlist_service.add_entry(store=store, post_id=payload.postId, identity=identity)
    return serialize(entry)


@router.delete("/{post_id}", response_model=MessageResponse)
def remove_from_wishlist(
    post_id: str,
    store: StoreDep,
    identity: CurrentIdentityDep,
    email: str | None = Query(None, description="Email the caller acts as"),
) -> MessageResponse:
    """Remove a post from the caller's wishlist."""
    wishlist_service.remove_entry(
        store=store, post_id=post_id, caller_email=email, identity=identity
    )
    return MessageResponse(message="Post removed from wishlist successfully")


@router.get("/{email}", response_model=list[PostSummary])
def list_wishlist(email: str, store: StoreDep, identity: CurrentIdentityDep) -> list[dict[str, Any]]:
    """Return the caller's wishlisted posts with their word counts."""
    posts = wishlist_service.list_entries(store=store, email=email, identity=identity)
    return serialize_many(posts)
