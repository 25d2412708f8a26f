# src/stackmind/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .catalog import router as catalog_router
from .comments import router as comments_router
from .posts import router as posts_router
from .session import router as session_router
from .wishlist import router as wishlist_router

__all__ = [
    "catalog_router",
    "comments_router",
    "posts_router",
    "session_router",
    "wishlist_router",
]
