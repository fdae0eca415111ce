"""Weather Client — request shape, description extraction, error mapping.

Tests:
    - GET carries q=<city> and appid=<key>
    - weather[0].description returned; fallback when absent
    - Timeouts, connection errors, non-2xx and non-JSON → WeatherAPIError

Design Decisions:
    - httpx.MockTransport: exercises the real AsyncClient without network
"""

import httpx
import pytest

from taskapi.core.domain_types import WEATHER_FALLBACK
from taskapi.core.errors import WeatherAPIError
from taskapi.infrastructure.weather_client import WeatherClient, extract_description

BASE_URL = "https://weather.test/data/2.5/weather"


def _client(handler) -> WeatherClient:
    return WeatherClient(
        "key-123",
        base_url=BASE_URL,
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


async def test_fetch_returns_first_description():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={
            "weather": [{"description": "scattered clouds"}, {"description": "mist"}],
        })

    weather = _client(handler)
    assert await weather.fetch_description("London") == "scattered clouds"
    await weather.aclose()

    assert seen[0].method == "GET"
    assert seen[0].url.params["q"] == "London"
    assert seen[0].url.params["appid"] == "key-123"
    assert str(seen[0].url).startswith(BASE_URL)


async def test_fetch_falls_back_when_weather_list_empty():
    weather = _client(lambda request: httpx.Response(200, json={"weather": []}))
    assert await weather.fetch_description("Nowhere") == WEATHER_FALLBACK


async def test_fetch_falls_back_when_description_missing():
    weather = _client(lambda request: httpx.Response(200, json={"weather": [{"main": "Rain"}]}))
    assert await weather.fetch_description("Bergen") == WEATHER_FALLBACK


async def test_http_error_status_raises():
    weather = _client(lambda request: httpx.Response(404, json={"message": "city not found"}))
    with pytest.raises(WeatherAPIError) as exc:
        await weather.fetch_description("Atlantis")
    assert exc.value.api_error_type == "http_status"
    assert exc.value.status_code == 404


async def test_connection_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(WeatherAPIError) as exc:
        await _client(handler).fetch_description("London")
    assert exc.value.api_error_type == "connection_error"


async def test_timeout_raises():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(WeatherAPIError) as exc:
        await _client(handler).fetch_description("London")
    assert exc.value.api_error_type == "timeout"


async def test_non_json_body_raises():
    weather = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(WeatherAPIError) as exc:
        await weather.fetch_description("London")
    assert exc.value.api_error_type == "invalid_payload"


@pytest.mark.parametrize("payload", [
    None, [], "text", {}, {"weather": "sunny"}, {"weather": ["sunny"]},
    {"weather": [{"description": ""}]},
])
def test_extract_description_fallbacks(payload):
    assert extract_description(payload) == WEATHER_FALLBACK
