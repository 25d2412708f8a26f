"""Data access helpers for post comments."""
from __future__ import annotations

from typing import Any

from pymongo import DESCENDING

from stackmind.db.store import BlogStore

__all__ = ["CommentRepository"]


class CommentRepository:
    """Append-only access to the comments collection."""

    def __init__(self, store: BlogStore) -> None:
        self.collection = store.comments

    def list_for_post(self, post_id: str) -> list[dict[str, Any]]:
        """Return the comments of a post, newest first."""
        return list(self.collection.find({"postId": post_id}).sort("createdAt", DESCENDING))

    def insert(self, doc: dict[str, Any]) -> dict[str, Any]:
        result = self.collection.insert_one(doc)
        return {**doc, "_id": result.inserted_id}
