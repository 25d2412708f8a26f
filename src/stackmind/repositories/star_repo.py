"""Read access to the featured-person records."""
from __future__ import annotations

from typing import Any

from stackmind.db.store import BlogStore

__all__ = ["StarRepository"]


class StarRepository:
    def __init__(self, store: BlogStore) -> None:
        self.collection = store.stars

    def sample_one(self) -> dict[str, Any] | None:
        """Return one uniformly sampled record, or ``None`` when the collection is empty."""
        for doc in self.collection.aggregate([{"$sample": {"size": 1}}]):
            return doc
        return None
