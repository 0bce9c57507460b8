"""Health and readiness check routes."""

from fastapi import APIRouter, Depends

from config import Settings
from routes.deps import get_settings

router = APIRouter()


@router.get("/ready")
async def ready(settings: Settings = Depends(get_settings)) -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "garden-api", "commit": settings.git_sha}


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict:
    """Report which integrations have credentials configured."""
    missing = settings.validate()
    return {
        "status": "ok" if not missing else "degraded",
        "service": "garden-api",
        "commit": settings.git_sha,
        "weather": "missing_key" if "WEATHER_API_KEY" in missing else "configured",
        "supabase": (
            "missing_credentials"
            if {"SUPABASE_URL", "SUPABASE_ANON_KEY"} & set(missing)
            else "configured"
        ),
    }
