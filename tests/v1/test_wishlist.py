# tests/v1/test_wishlist.py
"""Tests for wishlist endpoints."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from fastapi import status
from fastapi.testclient import TestClient

from stackmind.db.store import BlogStore

from tests.conftest import ALICE, BOB

PostFactory = Callable[..., dict[str, Any]]


def test_add_to_wishlist(alice_client: TestClient, store: BlogStore, make_post: PostFactory) -> None:
    post = make_post()

    response = alice_client.post("/wishlist", json={"postId": str(post["_id"]), "userEmail": BOB})

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["postId"] == str(post["_id"])
    assert data["userEmail"] == ALICE
    assert data["addedAt"]
    entry = store.wishlist.find_one({"postId": post["_id"]})
    assert entry["userEmail"] == ALICE


def test_second_add_is_conflict(alice_client: TestClient, store: BlogStore, make_post: PostFactory) -> None:
    post = make_post()
    payload = {"postId": str(post["_id"])}

    assert alice_client.post("/wishlist", json=payload).status_code == status.HTTP_201_CREATED
    response = alice_client.post("/wishlist", json=payload)

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["detail"] == "Post already in wishlist"
    assert store.wishlist.count_documents({}) == 1


def test_add_requires_post_id(alice_client: TestClient) -> None:
    response = alice_client.post("/wishlist", json={})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_add_with_malformed_post_id_is_bad_request(alice_client: TestClient) -> None:
    response = alice_client.post("/wishlist", json={"postId": "xyz"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid postId"


def test_add_requires_session(client: TestClient, make_post: PostFactory) -> None:
    post = make_post()
    response = client.post("/wishlist", json={"postId": str(post["_id"])})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_list_wishlist_with_word_counts(
    alice_client: TestClient, store: BlogStore, make_post: PostFactory
) -> None:
    older = make_post(title="older", longDescription="one two")
    newer = make_post(title="newer", longDescription=None)
    make_post(title="not saved")
    for post in (older, newer):
        alice_client.post("/wishlist", json={"postId": str(post["_id"])})

    response = alice_client.get(f"/wishlist/{ALICE}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [post["title"] for post in data] == ["newer", "older"]
    assert [post["wordCount"] for post in data] == [0, 2]
    assert set(data[0]) == {"id", "title", "category", "name", "createdAt", "wordCount"}


def test_empty_wishlist_is_empty_list(alice_client: TestClient) -> None:
    response = alice_client.get(f"/wishlist/{ALICE}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_listing_someone_elses_wishlist_is_forbidden(
    login_as: Callable[[str], TestClient], store: BlogStore, make_post: PostFactory
) -> None:
    post = make_post()
    store.wishlist.insert_one(
        {"postId": post["_id"], "userEmail": BOB, "addedAt": datetime.now(UTC)}
    )
    client = login_as(ALICE)

    response = client.get(f"/wishlist/{BOB}")

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Unauthorized to access wishlist"


def test_list_requires_session(client: TestClient) -> None:
    assert client.get(f"/wishlist/{ALICE}").status_code == status.HTTP_401_UNAUTHORIZED


def test_remove_from_wishlist(alice_client: TestClient, store: BlogStore, make_post: PostFactory) -> None:
    post = make_post()
    alice_client.post("/wishlist", json={"postId": str(post["_id"])})

    response = alice_client.delete(f"/wishlist/{post['_id']}", params={"email": ALICE})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Post removed from wishlist successfully"}
    assert store.wishlist.count_documents({}) == 0


def test_remove_missing_entry_is_not_found(alice_client: TestClient) -> None:
    response = alice_client.delete(f"/wishlist/{ObjectId()}", params={"email": ALICE})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_remove_with_foreign_email_is_forbidden(
    login_as: Callable[[str], TestClient], store: BlogStore, make_post: PostFactory
) -> None:
    post = make_post()
    store.wishlist.insert_one(
        {"postId": post["_id"], "userEmail": BOB, "addedAt": datetime.now(UTC)}
    )
    client = login_as(ALICE)

    response = client.delete(f"/wishlist/{post['_id']}", params={"email": BOB})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert store.wishlist.count_documents({"userEmail": BOB}) == 1


def test_remove_never_touches_other_users_entries(
    login_as: Callable[[str], TestClient], store: BlogStore, make_post: PostFactory
) -> None:
    post = make_post()
    store.wishlist.insert_one(
        {"postId": post["_id"], "userEmail": BOB, "addedAt": datetime.now(UTC)}
    )
    client = login_as(ALICE)

    response = client.delete(f"/wishlist/{post['_id']}", params={"email": ALICE})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert store.wishlist.count_documents({"userEmail": BOB}) == 1


def test_add_conflicts_with_string_post_id_entry(
    alice_client: TestClient, store: BlogStore, make_post: PostFactory
) -> None:
    post = make_post()
    store.wishlist.insert_one({"postId": str(post["_id"]), "userEmail": ALICE})

    response = alice_client.post("/wishlist", json={"postId": str(post["_id"])})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert store.wishlist.count_documents({"userEmail": ALICE}) == 1


def test_remove_string_post_id_entry(
    alice_client: TestClient, store: BlogStore, make_post: PostFactory
) -> None:
    post = make_post()
    store.wishlist.insert_one({"postId": str(post["_id"]), "userEmail": ALICE})
    assert len(alice_client.get(f"/wishlist/{ALICE}").json()) == 1

    response = alice_client.delete(f"/wishlist/{post['_id']}", params={"email": ALICE})

    assert response.status_code == status.HTTP_200_OK
    assert store.wishlist.count_documents({}) == 0
    assert alice_client.get(f"/wishlist/{ALICE}").json() == []


def test_remove_without_email_query_is_forbidden(alice_client: TestClient) -> None:
    response = alice_client.delete(f"/wishlist/{ObjectId()}")
    assert response.status_code == status.HTTP_403_FORBIDDEN
