"""Security Primitives — bcrypt password hashing and HS256 bearer tokens.

Invariants:
    - Passwords stored only as salted bcrypt digests (cost from settings)
    - verify_password never raises on a malformed stored hash; it returns False
    - Tokens carry the user id in `sub`, plus `iat`; `exp` only when expiry > 0
    - Every decode failure (bad signature, expired, missing/garbage sub) maps to
      AuthenticationError, so callers cannot tell the failure modes apart

Design Decisions:
    - bcrypt and PyJWT called directly, no wrapper framework
    - Functions are synchronous; services push hashing onto a worker thread
    - DUMMY hash used for unknown-email logins so both failure paths pay the
      same bcrypt cost
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from uuid import UUID

import bcrypt
import jwt

from taskapi.core.domain_types import UserId
from taskapi.core.errors import AuthenticationError


# ─── Passwords ──────────────────────────────────────────────────

def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with a fresh salt at the given cost factor."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(
            password.encode("utf-8"), password_hash.encode("utf-8"),
        )
    except ValueError:
        return False


@lru_cache
def dummy_password_hash(rounds: int = 10) -> str:
    """Stable hash compared against when the email is unknown."""
    return hash_password("not-a-real-password", rounds)


# ─── Tokens ─────────────────────────────────────────────────────

def create_access_token(
    user_id: UUID,
    secret: str,
    algorithm: str = "HS256",
    expire_minutes: int = 0,
    now: datetime | None = None,
) -> str:
    """Sign a bearer token for the given user."""
    issued_at = now or datetime.now(timezone.utc)
    payload: dict = {"sub": str(user_id), "iat": issued_at}
    if expire_minutes > 0:
        payload["exp"] = issued_at + timedelta(minutes=expire_minutes)
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(
    token: str, secret: str, algorithm: str = "HS256",
) -> UserId:
    """Verify signature/expiry and return the embedded user id."""
    try:
        payload = jwt.decode(
            token, secret, algorithms=[algorithm],
            options={"require": ["sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired", "TOKEN_EXPIRED")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token", "INVALID_TOKEN")

    try:
        return UserId(UUID(str(payload["sub"])))
    except ValueError:
        raise AuthenticationError("Invalid token", "INVALID_TOKEN")
