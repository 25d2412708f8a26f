"""Domain errors raised by services and the authorization guard.

Each error carries the HTTP status it is reported with; the application
registers a single handler that renders them as ``{"detail": message}``.
"""

from __future__ import annotations

from fastapi import status


class StackMindError(Exception):
    """Base class for failures reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(StackMindError):
    """Missing or invalid required fields, or a malformed identifier."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class UnauthorizedError(StackMindError):
    """Missing, invalid or expired session token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"


class ForbiddenError(StackMindError):
    """Authenticated caller is not the owner of the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(StackMindError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(StackMindError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(StackMindError):
    """Store unavailable or an unexpected failure."""


__all__ = [
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "InternalError",
    "NotFoundError",
    "StackMindError",
    "UnauthorizedError",
]
