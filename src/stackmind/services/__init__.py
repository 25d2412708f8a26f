# src/stackmind/services/__init__.py
"""Business logic services for the StackMind API."""

from . import comment_service, post_service, wishlist_service
from .authorization import ensure_owner, ensure_same_identity
from .text import count_words

__all__ = [
    "comment_service",
    "count_words",
    "ensure_owner",
    "ensure_same_identity",
    "post_service",
    "wishlist_service",
]
