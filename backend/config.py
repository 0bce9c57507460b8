"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # WeatherAPI.com
        self.weather_api_key: str | None = os.getenv("WEATHER_API_KEY")
        self.weather_timeout_seconds: float = float(os.getenv("WEATHER_TIMEOUT_SECONDS", "8"))

        # Wikipedia / YouTube lookups
        self.lookup_timeout_seconds: float = float(os.getenv("LOOKUP_TIMEOUT_SECONDS", "10"))
        self.wiki_cache_ttl_seconds: int = int(os.getenv("WIKI_CACHE_TTL_SECONDS", str(7 * 24 * 3600)))
        self.youtube_cache_ttl_seconds: int = int(os.getenv("YOUTUBE_CACHE_TTL_SECONDS", str(24 * 3600)))

        # Supabase
        self.supabase_url: str | None = os.getenv("SUPABASE_URL")
        self.supabase_anon_key: str | None = os.getenv("SUPABASE_ANON_KEY")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing env vars for weather and submission storage."""
        required = ["WEATHER_API_KEY", "SUPABASE_URL", "SUPABASE_ANON_KEY"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "SUPABASE_ANON_KEY": "supabase_anon_key",
    }
    return mapping.get(env_var, env_var.lower())
