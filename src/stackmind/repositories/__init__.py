"""Collection-level data access for the blog resources."""

from .comment_repo import CommentRepository
from .post_repo import MUTABLE_POST_FIELDS, PostRepository
from .star_repo import StarRepository
from .wishlist_repo import WishlistRepository

__all__ = [
    "CommentRepository",
    "MUTABLE_POST_FIELDS",
    "PostRepository",
    "StarRepository",
    "WishlistRepository",
]
