"""Tests for the weather proxy and its response transform."""

import asyncio

import httpx
import pytest

from services.weather import icon_code, main_condition, transform_forecast

FORECAST = {
    "location": {"name": "Hobart"},
    "current": {
        "temp_c": 18.0,
        "feelslike_c": 16.5,
        "humidity": 62,
        "wind_kph": 36.0,
        "is_day": 1,
        "condition": {"code": 1003, "text": "Partly cloudy"},
    },
    "forecast": {
        "forecastday": [
            {
                "date": "2024-01-01",
                "day": {
                    "avgtemp_c": 15.2,
                    "mintemp_c": 9.1,
                    "maxtemp_c": 21.4,
                    "condition": {"code": 1183, "text": "Light rain"},
                },
            },
            {
                "date": "2024-01-02",
                "day": {
                    "avgtemp_c": 14.0,
                    "mintemp_c": 8.0,
                    "maxtemp_c": 19.0,
                    "condition": {"code": 1006, "text": "Cloudy"},
                },
            },
        ]
    },
}


@pytest.mark.parametrize(
    "code, expected",
    [(1000, "Clear"), (1009, "Clouds"), (1030, "Mist"), (1189, "Rain"), (1225, "Snow"), (1276, "Thunderstorm"),
     (9999, "Clear")],
)
def test_main_condition(code, expected):
    assert main_condition(code) == expected


def test_icon_code_day_night_and_fallback():
    assert icon_code(1000, 1) == "01d"
    assert icon_code(1000, 0) == "01n"
    assert icon_code(1006, 0) == "04"
    assert icon_code(1273, 0) == "11n"
    assert icon_code(4242, 0) == "01n"


def test_transform_forecast_schema():
    result = transform_forecast(FORECAST)

    assert result["current"] == {
        "temp": 18.0,
        "feels_like": 16.5,
        "humidity": 62,
        "wind_speed": 10.0,
        "weather": [{"main": "Clear", "description": "Partly cloudy", "icon": "02d"}],
    }
    assert result["daily"][0] == {
        "dt": 1704067200,
        "temp": {"day": 15.2, "min": 9.1, "max": 21.4},
        "weather": [{"main": "Rain", "description": "Light rain", "icon": "09d"}],
    }
    assert result["daily"][1]["dt"] == 1704067200 + 86400
    assert result["daily"][1]["weather"][0]["icon"] == "04"


def test_weather_route(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, json=FORECAST)

    resp = client.get("/api/weather", params={"city": "Hobart", "state": "TAS"})
    assert resp.status_code == 200
    assert resp.json()["current"]["wind_speed"] == 10.0
    assert len(resp.json()["daily"]) == 2

    params = upstream.requests[0].url.params
    assert params["q"] == "Hobart, TAS, Australia"
    assert params["days"] == "4"
    assert params["aqi"] == "no"
    assert params["key"] == "test-weather-key"


@pytest.mark.parametrize("params", [{"city": "Hobart"}, {"state": "TAS"}, {"city": " ", "state": "TAS"}])
def test_weather_requires_city_and_state(client, upstream, params):
    resp = client.get("/api/weather", params=params)
    assert resp.status_code == 400
    assert resp.json() == {"error": "City and state are required"}
    assert upstream.requests == []


def test_weather_upstream_error_message(client, upstream):
    upstream.handler = lambda request: httpx.Response(
        400, json={"error": {"code": 1006, "message": "No matching location found."}}
    )
    resp = client.get("/api/weather", params={"city": "Atlantis", "state": "TAS"})
    assert resp.status_code == 502
    assert resp.json() == {"error": "No matching location found."}


def test_weather_timeout(client, upstream):
    def handler(request):
        raise httpx.ConnectTimeout("deadline", request=request)

    upstream.handler = handler
    resp = client.get("/api/weather", params={"city": "Hobart", "state": "TAS"})
    assert resp.status_code == 504


def test_weather_network_error(client, upstream):
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    upstream.handler = handler
    resp = client.get("/api/weather", params={"city": "Hobart", "state": "TAS"})
    assert resp.status_code == 503


def test_weather_unexpected_body(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, json={"current": {}})
    resp = client.get("/api/weather", params={"city": "Hobart", "state": "TAS"})
    assert resp.status_code == 502
    assert resp.json() == {"error": "Invalid response from weather service"}


def test_weather_without_api_key(client, upstream, settings):
    settings.weather_api_key = None
    resp = client.get("/api/weather", params={"city": "Hobart", "state": "TAS"})
    assert resp.status_code == 500
    assert upstream.requests == []


def test_weather_overall_deadline(client, upstream, settings):
    settings.weather_timeout_seconds = 0.05

    async def slow(request):
        await asyncio.sleep(1)
        return httpx.Response(200, json=FORECAST)

    upstream.handler = slow
    resp = client.get("/api/weather", params={"city": "Hobart", "state": "TAS"})
    assert resp.status_code == 504
    assert resp.json() == {"error": "weather service request timed out. Please try again."}
