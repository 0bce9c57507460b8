"""Weather proxy route — current conditions plus a short forecast."""

import httpx
from fastapi import APIRouter, Depends, Query

from config import Settings
from errors import MissingParameterError
from routes.deps import get_settings, weather_client
from services.weather import get_weather

router = APIRouter(prefix="/api")


@router.get("/weather")
async def weather(
    city: str = Query(""),
    state: str = Query(""),
    client: httpx.AsyncClient = Depends(weather_client),
    settings: Settings = Depends(get_settings),
) -> dict:
    city, state = city.strip(), state.strip()
    if not city or not state:
        raise MissingParameterError("City and state are required")
    return await get_weather(
        client, settings.weather_api_key, city, state, deadline=settings.weather_timeout_seconds
    )
