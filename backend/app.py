"""FastAPI application entry point for the garden companion API."""

import logging
import sys
import time
from collections.abc import Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from errors import register_error_handlers
from services.cache import TTLCache
from services.submissions import SubmissionStore

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, clock: Callable[[], float] = time.time) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Garden Companion API", version="1.0.0")

    app.state.settings = settings
    # One cache per lookup endpoint, living as long as the process.
    app.state.wiki_cache = TTLCache(clock=clock)
    app.state.youtube_oembed_cache = TTLCache(clock=clock)
    app.state.youtube_top_cache = TTLCache(clock=clock)
    app.state.submissions = SubmissionStore(settings.supabase_url, settings.supabase_anon_key)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.analysis import router as analysis_router
    from routes.garden import router as garden_router
    from routes.health import router as health_router
    from routes.lookups import router as lookups_router
    from routes.weather import router as weather_router

    app.include_router(health_router)
    app.include_router(lookups_router)
    app.include_router(weather_router)
    app.include_router(analysis_router)
    app.include_router(garden_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = settings.validate()
        if missing:
            logger.warning("Missing env vars (weather/submission features may fail): %s", ", ".join(missing))

    return app


app = create_app()
