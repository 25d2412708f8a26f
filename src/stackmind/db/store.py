"""MongoDB store handle shared by the request handlers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from pymongo import ASCENDING, TEXT, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.server_api import ServerApi

from stackmind.core.errors import InternalError
from stackmind.core.settings import Settings

logger = logging.getLogger(__name__)

POSTS_COLLECTION = "blogs"
COMMENTS_COLLECTION = "comments"
WISHLIST_COLLECTION = "wishList"
STARS_COLLECTION = "StarPerson"


class BlogStore:
    """Explicitly constructed handle over the blog database collections."""

    def __init__(self, database: Database[Any], client: MongoClient[Any] | None = None) -> None:
        """Wrap ``database``; ``client`` is closed by :meth:`close` when given."""
        self.database = database
        self.client = client

    @property
    def posts(self) -> Collection[Any]:
        return self.database[POSTS_COLLECTION]

    @property
    def comments(self) -> Collection[Any]:
        return self.database[COMMENTS_COLLECTION]

    @property
    def wishlist(self) -> Collection[Any]:
        return self.database[WISHLIST_COLLECTION]

    @property
    def stars(self) -> Collection[Any]:
        return self.database[STARS_COLLECTION]

    def ensure_indexes(self) -> None:
        """Create the indexes the listing endpoints rely on."""
        self.posts.create_index([("title", TEXT)])
        self.posts.create_index([("category", ASCENDING)])
        # Lookup index only; duplicates are rejected by the wishlist service.
        self.wishlist.create_index([("postId", ASCENDING), ("userEmail", ASCENDING)])

    def ping(self) -> None:
        """Round-trip to the server; raises ``PyMongoError`` when unreachable."""
        if self.client is not None:
            self.client.admin.command("ping")

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


def connect_store(settings: Settings) -> BlogStore:
    """Open a client for ``settings`` and verify the deployment answers.

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached. Callers at
            startup let this propagate so the process exits.
    """
    client: MongoClient[Any] = MongoClient(
        settings.effective_mongodb_url,
        server_api=ServerApi("1", strict=False, deprecation_errors=True),
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        tz_aware=True,
    )
    store = BlogStore(client[settings.database_name], client=client)
    store.ping()
    logger.info("Connected to MongoDB database %s", settings.database_name)
    return store


def get_store(request: Request) -> BlogStore:
    """Return the store attached to the running application."""
    store: BlogStore | None = getattr(request.app.state, "store", None)
    if store is None:
        raise InternalError("Database not available")
    return store
