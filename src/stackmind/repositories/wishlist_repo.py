"""Data access helpers for wishlist entries."""
from __future__ import annotations

from typing import Any

from bson import ObjectId

from stackmind.db.store import BlogStore

__all__ = ["WishlistRepository"]


def _entry_filter(post_id: ObjectId, email: str) -> dict[str, Any]:
    # Older entries carry postId as a hex string.
    return {"postId": {"$in": [post_id, str(post_id)]}, "userEmail": email}


class WishlistRepository:
    """Thin wrapper around the wishlist collection.

    Every lookup is keyed by the owning ``userEmail``, so callers can only
    reach entries of the identity they pass in. A ``postId`` matches whether
    it was stored as an ObjectId or as its hex string.
    """

    def __init__(self, store: BlogStore) -> None:
        self.collection = store.wishlist

    def find(self, post_id: ObjectId, email: str) -> dict[str, Any] | None:
        return self.collection.find_one(_entry_filter(post_id, email))

    def insert(self, doc: dict[str, Any]) -> dict[str, Any]:
        result = self.collection.insert_one(doc)
        return {**doc, "_id": result.inserted_id}

    def delete(self, post_id: ObjectId, email: str) -> int:
        """Delete the entry for ``(post_id, email)``; return how many were removed."""
        result = self.collection.delete_one(_entry_filter(post_id, email))
        return result.deleted_count

    def post_ids_for(self, email: str) -> list[ObjectId]:
        """Return the ids of the posts wishlisted by ``email``.

        Entries written with a string ``postId`` are normalised to ObjectIds.
        """
        ids: list[ObjectId] = []
        for entry in self.collection.find({"userEmail": email}, {"postId": 1}):
            post_id = entry.get("postId")
            if isinstance(post_id, str) and ObjectId.is_valid(post_id):
                post_id = ObjectId(post_id)
            if isinstance(post_id, ObjectId):
                ids.append(post_id)
        return ids
