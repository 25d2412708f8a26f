"""Data access helpers for working with posts."""
from __future__ import annotations

from typing import Any

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.results import UpdateResult

from stackmind.db.store import BlogStore

__all__ = ["MUTABLE_POST_FIELDS", "SUMMARY_PROJECTION", "PostRepository"]

# Fields a post owner may change after creation. ``_id``, ``email`` and
# ``createdAt`` are server-controlled.
MUTABLE_POST_FIELDS: tuple[str, ...] = (
    "title",
    "category",
    "name",
    "shortDescription",
    "longDescription",
    "imageUrl",
)

SUMMARY_PROJECTION: dict[str, int] = {
    "title": 1,
    "category": 1,
    "name": 1,
    "createdAt": 1,
    "longDescription": 1,
}


class PostRepository:
    """Thin wrapper around the posts collection."""

    def __init__(self, store: BlogStore) -> None:
        """Initialize the repository with the shared store handle."""
        self.collection = store.posts

    def list_posts(self, *, category: str | None = None, search: str | None = None) -> list[dict[str, Any]]:
        """Return posts newest first, filtered by exact category and/or text search."""
        query: dict[str, Any] = {}
        if category:
            query["category"] = category
        if search:
            query["$text"] = {"$search": search}
        return list(self.collection.find(query).sort("createdAt", DESCENDING))

    def recent(self, limit: int) -> list[dict[str, Any]]:
        return list(self.collection.find().sort("createdAt", DESCENDING).limit(limit))

    def get(self, post_id: ObjectId) -> dict[str, Any] | None:
        return self.collection.find_one({"_id": post_id})

    def insert(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Insert ``doc`` and return it with the generated ``_id``."""
        result = self.collection.insert_one(doc)
        return {**doc, "_id": result.inserted_id}

    def update_fields(self, post_id: ObjectId, patch: dict[str, Any]) -> UpdateResult:
        """Apply the allow-listed subset of ``patch`` with ``$set``.

        Keys outside :data:`MUTABLE_POST_FIELDS` are ignored.
        """
        fields = {key: patch[key] for key in MUTABLE_POST_FIELDS if key in patch}
        return self.collection.update_one({"_id": post_id}, {"$set": fields})

    def summaries(self, post_ids: list[ObjectId] | None = None) -> list[dict[str, Any]]:
        """Return summary fields of posts in natural store order.

        Args:
            post_ids: Restrict the result to these ids; ``None`` means all posts.
        """
        query: dict[str, Any] = {}
        if post_ids is not None:
            query["_id"] = {"$in": post_ids}
        return list(self.collection.find(query, SUMMARY_PROJECTION))

    def categories(self) -> list[str]:
        """Return the distinct categories in ascending order."""
        return sorted(value for value in self.collection.distinct("category") if isinstance(value, str))
