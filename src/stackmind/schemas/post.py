"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post.

    The owner ``email`` and ``createdAt`` are stamped by the server.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(..., min_length=1, max_length=300, description="Post title")
    category: str = Field(..., min_length=1, max_length=100, description="Post category")
    name: str | None = Field(None, max_length=200, description="Author display name")
    shortDescription: str | None = Field(None, description="Teaser shown in listings")
    longDescription: str | None = Field(None, description="Full post body")
    imageUrl: str | None = Field(None, description="Cover image URL")


class PostUpdate(BaseModel):
    """Partial update of a post.

    Unknown keys, including ``_id``, ``email`` and ``createdAt``, are dropped.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str | None = Field(None, min_length=1, max_length=300)
    category: str | None = Field(None, min_length=1, max_length=100)
    name: str | None = Field(None, max_length=200)
    shortDescription: str | None = None
    longDescription: str | None = None
    imageUrl: str | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    model_config = ConfigDict(extra="allow")

    id: str
    title: str | None = None
    category: str | None = None
    name: str | None = None
    email: str | None = None
    shortDescription: str | None = None
    longDescription: str | None = None
    imageUrl: str | None = None
    createdAt: datetime | None = None


class PostSummary(BaseModel):
    """Projection used by the featured and wishlist listings."""

    id: str
    title: str | None = None
    category: str | None = None
    name: str | None = None
    createdAt: datetime | None = None
    wordCount: int


class PostUpdateResponse(BaseModel):
    message: str
    post: PostResponse
