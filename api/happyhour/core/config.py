from __future__ import annotations

import functools

import pytz
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Keystone Happy Hour"
    environment: str = "development"

    # Viewer position used until (or unless) the browser reports one. San Francisco.
    fallback_lat: float = 37.79
    fallback_lon: float = -122.4

    location_timeout_seconds: float = 8.0

    # Wall clock used to evaluate happy hour windows
    timezone: str = "America/Los_Angeles"

    # CORS configuration
    cors_origins: str = "*"

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @field_validator("location_timeout_seconds")
    @classmethod
    def validate_location_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("LOCATION_TIMEOUT_SECONDS must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject timezone names pytz does not know about."""
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError as exc:
            raise ValueError(f"Unknown TIMEZONE: {v}") from exc
        return v

    @field_validator("fallback_lat")
    @classmethod
    def validate_fallback_lat(cls, v: float) -> float:
        if not (-90 <= v <= 90):
            raise ValueError("FALLBACK_LAT must be within -90 to 90")
        return v

    @field_validator("fallback_lon")
    @classmethod
    def validate_fallback_lon(cls, v: float) -> float:
        if not (-180 <= v <= 180):
            raise ValueError("FALLBACK_LON must be within -180 to 180")
        return v

    @property
    def tzinfo(self):
        return pytz.timezone(self.timezone)


@functools.lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
