# src/stackmind/api/v1/endpoints/catalog.py
"""Read-only catalog endpoints: categories and the featured person."""

from typing import Any

from fastapi import APIRouter

from stackmind.api.v1.dependencies import StoreDep
from stackmind.core.errors import NotFoundError
from stackmind.db.documents import serialize
from stackmind.repositories.post_repo import PostRepository
from stackmind.repositories.star_repo import StarRepository

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=list[str])
def list_categories(store: StoreDep) -> list[str]:
    """Return the distinct post categories in ascending order."""
    return PostRepository(store).categories()


@router.get("/star")
def star_person(store: StoreDep) -> dict[str, Any] | None:
    """Return one randomly sampled featured-person record."""
    record = StarRepository(store).sample_one()
    if record is None:
        raise NotFoundError("No featured person available")
    return serialize(record)
