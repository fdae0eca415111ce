"""Auth Routes — signup and login.

Invariants:
    - Neither endpoint requires a bearer token
    - signup returns 201 with a message and no token
    - login returns 200 {token}; bad credentials → 401 with one generic message
"""

import logging

from fastapi import APIRouter, Depends, status

from taskapi.api.dependencies import get_auth_service
from taskapi.schemas.auth import Credentials, MessageResponse, TokenResponse
from taskapi.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/signup", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    body: Credentials, service: AuthService = Depends(get_auth_service),
):
    """Register a new user."""
    await service.signup(body.email, body.password)
    return MessageResponse(message="User created")


@router.post("/login", response_model=TokenResponse)
async def login(
    body: Credentials, service: AuthService = Depends(get_auth_service),
):
    """Exchange credentials for a bearer token."""
    token = await service.login(body.email, body.password)
    return TokenResponse(token=token)
