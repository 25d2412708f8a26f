# src/stackmind/api/v1/endpoints/session.py
"""Session cookie endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Response

from stackmind.api.v1.dependencies import CurrentIdentityDep
from stackmind.core.security import (
    Identity,
    clear_session_cookie,
    issue_token,
    set_session_cookie,
)
from stackmind.schemas.common import MessageResponse
from stackmind.schemas.session import SessionCheckResponse, SessionCreate, SessionUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.post("", response_model=MessageResponse, summary="Issue a session cookie")
async def create_session(payload: SessionCreate, response: Response) -> MessageResponse:
    """Sign a token for the submitted email and store it in the session cookie."""
    token = issue_token(Identity(email=payload.email))
    set_session_cookie(response, token)
    logger.info("Session issued for %s", payload.email)
    return MessageResponse(message="Session token created successfully")


@router.post("/logout", response_model=MessageResponse, summary="Clear the session cookie")
async def logout(response: Response) -> MessageResponse:
    """Drop the session cookie. The token itself is not revoked."""
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/check", response_model=SessionCheckResponse)
async def check_session(identity: CurrentIdentityDep) -> SessionCheckResponse:
    """Echo the identity asserted by the current session."""
    return SessionCheckResponse(message="Token is valid", user=SessionUser(email=identity.email))
