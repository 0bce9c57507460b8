"""WeatherAPI.com forecast client for the weather widget.

Requires WEATHER_API_KEY. The upstream response is re-shaped into the
OpenWeatherMap-style layout the widget was written against: ``current`` with
temperatures in °C and wind in m/s, plus a ``daily`` forecast list.
"""

import logging
from datetime import datetime, timezone

import httpx

from errors import GardenError, UpstreamError
from services.http import fetch, json_body

logger = logging.getLogger(__name__)

WEATHER_API_URL = "https://api.weatherapi.com/v1/forecast.json"
FORECAST_DAYS = 4

# WeatherAPI.com condition code -> OpenWeatherMap icon stem.
# Stems listed in _DAY_NIGHT_CODES get a "d"/"n" suffix.
_ICON_STEMS = {
    1000: "01", 1003: "02", 1006: "04", 1009: "04", 1030: "50",
    1063: "09", 1066: "13", 1069: "13", 1072: "09", 1087: "11",
    1114: "13", 1117: "13", 1135: "50", 1147: "50", 1150: "09",
    1153: "09", 1168: "09", 1171: "09", 1180: "09", 1183: "09",
    1186: "09", 1189: "09", 1192: "09", 1195: "09", 1198: "09",
    1201: "09", 1204: "13", 1207: "13", 1210: "13", 1213: "13",
    1216: "13", 1219: "13", 1222: "13", 1225: "13", 1237: "13",
    1240: "09", 1243: "09", 1246: "09", 1249: "13", 1252: "13",
    1255: "13", 1258: "13", 1261: "13", 1264: "13", 1273: "11",
    1276: "11", 1279: "11", 1282: "11",
}

_DAY_NIGHT_CODES = {
    1000, 1003, 1063, 1066, 1180, 1183, 1186, 1189, 1192, 1195,
    1210, 1213, 1216, 1219, 1222, 1225, 1240, 1243, 1246, 1255,
    1258, 1273, 1276, 1279, 1282,
}


def main_condition(code: int) -> str:
    """Map a condition code onto an OpenWeatherMap ``main`` group."""
    if 1000 <= code <= 1003:
        return "Clear"
    if 1006 <= code <= 1009:
        return "Clouds"
    if 1030 <= code <= 1032:
        return "Mist"
    if 1063 <= code <= 1201:
        return "Rain"
    if 1204 <= code <= 1264:
        return "Snow"
    if 1273 <= code <= 1282:
        return "Thunderstorm"
    return "Clear"


def icon_code(code: int, is_day: int) -> str:
    stem = _ICON_STEMS.get(code)
    if stem is None:
        return "01d" if is_day else "01n"
    if code in _DAY_NIGHT_CODES:
        return stem + ("d" if is_day else "n")
    return stem


def _conditions(condition: dict, is_day: int) -> list[dict]:
    code = condition["code"]
    return [{
        "main": main_condition(code),
        "description": condition["text"],
        "icon": icon_code(code, is_day),
    }]


def _date_to_unix(date_str: str) -> int:
    day = datetime.strptime(date_str, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    return int(day.timestamp())


def transform_forecast(data: dict) -> dict:
    """Re-shape a WeatherAPI.com forecast into the widget's schema."""
    current = data["current"]
    return {
        "current": {
            "temp": current["temp_c"],
            "feels_like": current["feelslike_c"],
            "humidity": current["humidity"],
            "wind_speed": current["wind_kph"] / 3.6,
            "weather": _conditions(current["condition"], current["is_day"]),
        },
        "daily": [
            {
                "dt": _date_to_unix(day["date"]),
                "temp": {
                    "day": day["day"]["avgtemp_c"],
                    "min": day["day"]["mintemp_c"],
                    "max": day["day"]["maxtemp_c"],
                },
                # forecast icons always use the daytime variant
                "weather": _conditions(day["day"]["condition"], 1),
            }
            for day in data["forecast"]["forecastday"]
        ],
    }


def _error_message(resp: httpx.Response) -> str:
    message = f"Weather API error: {resp.reason_phrase}"
    try:
        body = resp.json()
    except ValueError:
        return resp.text or message
    if isinstance(body, dict) and isinstance(body.get("error"), dict) and body["error"].get("message"):
        return body["error"]["message"]
    return resp.text or message


async def get_weather(
    client: httpx.AsyncClient,
    api_key: str | None,
    city: str,
    state: str,
    deadline: float | None = None,
) -> dict:
    """Current conditions and a short forecast for an Australian city."""
    if not api_key:
        raise GardenError("Weather service is not configured (WEATHER_API_KEY missing)", status_code=500)

    url = httpx.URL(
        WEATHER_API_URL,
        params={
            "key": api_key,
            "q": f"{city}, {state}, Australia",
            "days": FORECAST_DAYS,
            "aqi": "no",
        },
    )
    resp = await fetch(client, url, "weather service", deadline=deadline)
    if not resp.is_success:
        message = _error_message(resp)
        logger.error("Weather API error: %d %s", resp.status_code, message)
        raise UpstreamError(message)

    data = json_body(resp, "weather service")
    try:
        return transform_forecast(data)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Unexpected weather response shape: %s", e)
        raise UpstreamError("Invalid response from weather service") from e
