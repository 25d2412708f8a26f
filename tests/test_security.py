# tests/test_security.py
"""Tests for session token issuing and verification."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi import Response
from jose import jwt

from stackmind.core.errors import UnauthorizedError
from stackmind.core.security import (
    Identity,
    clear_session_cookie,
    issue_token,
    set_session_cookie,
    verify_token,
)
from stackmind.core.settings import settings


@pytest.mark.parametrize(
    "email",
    ["alice@example.com", "Bob.Smith+blog@Example.ORG", "x@y"],
)
def test_verify_returns_issued_identity(email: str) -> None:
    identity = Identity(email=email)
    assert verify_token(issue_token(identity)) == identity


def test_token_lifetime_is_seven_days() -> None:
    now = datetime(2024, 5, 1, tzinfo=UTC)
    token = issue_token(Identity(email="a@b.c"), now=now)
    claims = jwt.get_unverified_claims(token)
    assert claims["email"] == "a@b.c"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_is_rejected(token: str | None) -> None:
    with pytest.raises(UnauthorizedError) as exc_info:
        verify_token(token)
    assert "No token provided" in exc_info.value.message


def test_malformed_token_is_rejected() -> None:
    with pytest.raises(UnauthorizedError):
        verify_token("not.a.valid.jwt")


def test_expired_token_is_rejected() -> None:
    issued = datetime.now(UTC) - timedelta(days=8)
    token = issue_token(Identity(email="a@b.c"), now=issued)
    with pytest.raises(UnauthorizedError) as exc_info:
        verify_token(token)
    assert exc_info.value.message == "Invalid or expired token"


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = jwt.encode(
        {"email": "a@b.c", "exp": datetime.now(UTC) + timedelta(days=1)},
        "some-other-secret",
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(UnauthorizedError):
        verify_token(token)


def test_tampered_signature_is_rejected() -> None:
    token = issue_token(Identity(email="a@b.c"))
    header, payload, signature = token.split(".")
    flipped = "A" if signature[0] != "A" else "B"
    with pytest.raises(UnauthorizedError):
        verify_token(f"{header}.{payload}.{flipped}{signature[1:]}")


@pytest.mark.parametrize("claims", [{}, {"email": ""}, {"email": 42}])
def test_token_without_email_claim_is_rejected(claims: dict[str, object]) -> None:
    token = jwt.encode(
        {**claims, "exp": datetime.now(UTC) + timedelta(days=1)},
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(UnauthorizedError):
        verify_token(token)


def test_session_cookie_is_http_only() -> None:
    response = Response()
    set_session_cookie(response, "abc")
    header = response.headers["set-cookie"]
    assert header.startswith(f"{settings.session_cookie_name}=abc")
    assert "HttpOnly" in header
    assert f"Max-Age={settings.access_token_max_age}" in header


def test_clearing_cookie_expires_it() -> None:
    response = Response()
    clear_session_cookie(response)
    header = response.headers["set-cookie"]
    assert header.startswith(f'{settings.session_cookie_name}=""')
    assert "Max-Age=0" in header
