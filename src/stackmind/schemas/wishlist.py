"""Wishlist schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WishlistCreate(BaseModel):
    """Schema for adding a post to the caller's wishlist."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    postId: str = Field(..., min_length=1, description="Identifier of the post to save")


class WishlistEntryResponse(BaseModel):
    id: str
    postId: str
    userEmail: str
    addedAt: datetime
