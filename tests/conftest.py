# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any

import mongomock
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-stackmind")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("COOKIE_SAMESITE", "lax")

from stackmind.core.security import Identity, issue_token
from stackmind.core.settings import settings
from stackmind.db.store import BlogStore
from stackmind.main import create_app

ALICE = "alice@example.com"
BOB = "bob@example.com"

_BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture()
def store() -> Iterator[BlogStore]:
    """Provide a store backed by a fresh in-memory MongoDB."""
    client: mongomock.MongoClient = mongomock.MongoClient()
    yield BlogStore(client[settings.database_name])
    client.close()


@pytest.fixture()
def app(store: BlogStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


def token_for(email: str) -> str:
    return issue_token(Identity(email=email))


@pytest.fixture()
def login_as(client: TestClient) -> Callable[[str], TestClient]:
    """Return a helper that switches the client's session cookie to ``email``."""

    def _login(email: str) -> TestClient:
        client.cookies.clear()
        client.cookies.set(settings.session_cookie_name, token_for(email))
        return client

    return _login


@pytest.fixture()
def alice_client(login_as: Callable[[str], TestClient]) -> TestClient:
    """Client authenticated as the primary test user."""
    return login_as(ALICE)


@pytest.fixture()
def make_post(store: BlogStore) -> Callable[..., dict[str, Any]]:
    """Insert posts directly into the store.

    Each call is stamped one hour after the previous one unless ``createdAt``
    is given, so ordering by creation time is deterministic. Passing ``None``
    for a field leaves it out of the document.
    """
    counter = {"n": 0}

    def _make(**fields: Any) -> dict[str, Any]:
        counter["n"] += 1
        doc: dict[str, Any] = {
            "title": f"Post {counter['n']}",
            "category": "Tech",
            "name": "Alice",
            "email": ALICE,
            "longDescription": "one two three",
            "createdAt": _BASE_TIME + timedelta(hours=counter["n"]),
        }
        doc.update(fields)
        doc = {key: value for key, value in doc.items() if value is not None}
        result = store.posts.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    return _make
