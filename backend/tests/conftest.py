"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use real secrets or a real provider
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("WEATHER_API_KEY", "test-weather-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
