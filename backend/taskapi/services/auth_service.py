"""Auth Service — signup (hash + persist) and login (verify + issue token).

Invariants:
    - signup never returns a token; login never creates a user
    - Duplicate email surfaces as ConflictError (409), detected by the unique index
    - Unknown email and wrong password raise the identical AuthenticationError
    - bcrypt runs on a worker thread so the event loop keeps serving requests

Design Decisions:
    - Settings injected (jwt secret, algorithm, expiry, bcrypt cost): the service
      is constructed per request by a FastAPI dependency
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.config import Settings
from taskapi.core.errors import AuthenticationError, ConflictError
from taskapi.infrastructure.security import (
    create_access_token,
    dummy_password_hash,
    hash_password,
    verify_password,
)
from taskapi.models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    """Credential store operations."""

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings

    async def signup(self, email: str, password: str) -> User:
        """Create a user with a bcrypt-hashed password."""
        password_hash = await asyncio.to_thread(
            hash_password, password, self.settings.bcrypt_rounds,
        )
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Signup rejected: email already registered")
            raise ConflictError("Email already registered")
        logger.info("User created", extra={"user_id": str(user.id)})
        return user

    async def login(self, email: str, password: str) -> str:
        """Verify credentials and return a signed bearer token."""
        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()

        stored_hash = (
            user.password_hash if user
            else await asyncio.to_thread(
                dummy_password_hash, self.settings.bcrypt_rounds,
            )
        )
        password_ok = await asyncio.to_thread(
            verify_password, password, stored_hash,
        )
        if not user or not password_ok:
            logger.info("Login failed: invalid credentials")
            raise AuthenticationError()

        logger.info("Login succeeded", extra={"user_id": str(user.id)})
        return create_access_token(
            user.id,
            self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm,
            expire_minutes=self.settings.jwt_expire_minutes,
        )
