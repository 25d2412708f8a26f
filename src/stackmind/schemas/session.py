"""Session schemas."""

from pydantic import BaseModel, ConfigDict, Field


class SessionCreate(BaseModel):
    """Request body for issuing a session cookie."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=3, max_length=320, description="Caller email address")


class SessionUser(BaseModel):
    email: str


class SessionCheckResponse(BaseModel):
    message: str
    user: SessionUser
