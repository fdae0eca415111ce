"""Request Dependencies — bearer-token auth and per-request service wiring.

Invariants:
    - get_current_user_id runs before every task route; a missing, non-bearer,
      empty, invalid or expired token raises AuthenticationError (401)
    - The returned UserId is the only identity task routes trust
    - Services receive settings/db/weather explicitly from here

Design Decisions:
    - HTTPBearer(auto_error=False): FastAPI's own error would be a 403 with a
      different envelope; we raise our own 401 instead
    - WeatherClient lives on app.state (created in lifespan), so tests swap it
      through dependency_overrides[get_weather_lookup]
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskapi.config import Settings, get_settings
from taskapi.core.domain_types import UserId
from taskapi.core.errors import AuthenticationError
from taskapi.core.protocols import WeatherLookup
from taskapi.infrastructure.database import get_db
from taskapi.infrastructure.security import decode_access_token
from taskapi.services.auth_service import AuthService
from taskapi.services.task_service import TaskService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> UserId:
    """Authenticate the request from its Authorization: Bearer header."""
    if credentials is None or not credentials.credentials.strip():
        raise AuthenticationError(
            "Missing or malformed Authorization header", "MISSING_TOKEN",
        )
    return decode_access_token(
        credentials.credentials.strip(),
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def get_weather_lookup(request: Request) -> WeatherLookup:
    weather = getattr(request.app.state, "weather_client", None)
    if weather is None:
        raise RuntimeError("Weather client not initialized")
    return weather


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, settings)


def get_task_service(
    db: AsyncSession = Depends(get_db),
    weather: WeatherLookup = Depends(get_weather_lookup),
) -> TaskService:
    return TaskService(db, weather)
