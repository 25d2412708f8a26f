"""Comment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Schema for commenting on a post; the author comes from the session."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    postId: str = Field(..., min_length=1, description="Identifier of the commented post")
    text: str = Field(..., min_length=1, max_length=5000, description="Comment body")
    authorName: str | None = Field(None, max_length=200)
    authorPhoto: str | None = None


class CommentResponse(BaseModel):
    id: str
    postId: str
    authorEmail: str
    authorName: str | None = None
    authorPhoto: str | None = None
    text: str
    createdAt: datetime
