"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse
from .common import MessageResponse
from .post import PostCreate, PostResponse, PostSummary, PostUpdate, PostUpdateResponse
from .session import SessionCheckResponse, SessionCreate, SessionUser
from .wishlist import WishlistCreate, WishlistEntryResponse

__all__ = [
    "CommentCreate", "CommentResponse",
    "MessageResponse",
    "PostCreate", "PostResponse", "PostSummary", "PostUpdate", "PostUpdateResponse",
    "SessionCheckResponse", "SessionCreate", "SessionUser",
    "WishlistCreate", "WishlistEntryResponse",
]
