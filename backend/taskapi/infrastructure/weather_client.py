"""Weather Client — wraps httpx.AsyncClient for the current-weather lookup.

Invariants:
    - One GET per lookup: ?q=<city>&appid=<key>, bounded by the configured timeout
    - Returns weather[0].description; WEATHER_FALLBACK when the list or field is absent
    - Transport errors, timeouts, non-2xx statuses, non-JSON bodies → WeatherAPIError
    - No retries; the caller decides whether a failure is fatal

Design Decisions:
    - Wrapper over raw client: isolates error mapping from task_service
    - Shared AsyncClient created in the app lifespan; pass `client=` to inject a
      transport (tests use httpx.MockTransport)
    - API key never logged
"""

import logging

import httpx

from taskapi.core.domain_types import WEATHER_FALLBACK
from taskapi.core.errors import WeatherAPIError

logger = logging.getLogger(__name__)


def extract_description(payload: object) -> str:
    """Pull weather[0].description out of a provider response body."""
    if not isinstance(payload, dict):
        return WEATHER_FALLBACK
    entries = payload.get("weather")
    if not isinstance(entries, list) or not entries:
        return WEATHER_FALLBACK
    first = entries[0]
    if not isinstance(first, dict):
        return WEATHER_FALLBACK
    description = first.get("description")
    if not isinstance(description, str) or not description.strip():
        return WEATHER_FALLBACK
    return description


class WeatherClient:
    """Current-weather lookup with timeout and error mapping."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org/data/2.5/weather",
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def fetch_description(self, city: str) -> str:
        """Return a short description of the current weather in `city`."""
        try:
            response = await self.client.get(
                self.base_url, params={"q": city, "appid": self.api_key},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise WeatherAPIError(str(e) or "request timed out", "timeout")
        except httpx.HTTPStatusError as e:
            raise WeatherAPIError(
                f"provider returned {e.response.status_code}",
                "http_status",
                status_code=e.response.status_code,
            )
        except httpx.HTTPError as e:
            raise WeatherAPIError(str(e) or type(e).__name__, "connection_error")
        except ValueError:
            raise WeatherAPIError("response body is not JSON", "invalid_payload")

        description = extract_description(payload)
        logger.info("Weather lookup succeeded", extra={"city": city})
        return description

    async def aclose(self) -> None:
        await self.client.aclose()
