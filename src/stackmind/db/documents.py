"""Helpers for converting between BSON documents and API payloads."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from bson import ObjectId

from stackmind.core.errors import BadRequestError


def utcnow() -> datetime:
    """Return the current UTC time truncated to BSON millisecond precision."""
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def object_id(value: str, *, field: str = "id") -> ObjectId:
    """Parse ``value`` as an ObjectId.

    Raises:
        BadRequestError: If ``value`` is not a 24-character hex identifier.
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise BadRequestError(f"Invalid {field}")
    return ObjectId(value)


def _to_json(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _to_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    return value


def serialize(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    """Return a JSON-safe copy of ``doc`` with ``_id`` exposed as ``id``."""
    if doc is None:
        return None
    data = {**doc}
    if "_id" in data:
        data["id"] = str(data.pop("_id"))
    return {key: _to_json(value) for key, value in data.items()}


def serialize_many(docs: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [serialize(doc) for doc in docs]  # type: ignore[misc]
