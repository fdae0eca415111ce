"""Task Weather API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database engine and weather client created on startup, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Weather client kept on app.state and injected per request (no module global)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskapi.api.error_handlers import register_error_handlers
from taskapi.api.routes import auth, health, tasks
from taskapi.config import get_settings
from taskapi.infrastructure.database import init_db
from taskapi.infrastructure.observability import setup_logging
from taskapi.infrastructure.weather_client import WeatherClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.weather_client = WeatherClient(
        settings.weather_api_key,
        base_url=settings.weather_api_url,
        timeout_seconds=settings.weather_timeout_seconds,
    )
    logger.info("Task Weather API started")
    yield
    logger.info("Task Weather API shutting down")
    await app.state.weather_client.aclose()
    await manager.dispose()


app = FastAPI(
    title="Task Weather API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(tasks.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point — serve the app with uvicorn on HOST:PORT."""
    current = get_settings()
    uvicorn.run(
        "taskapi.main:app", host=current.host, port=current.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
