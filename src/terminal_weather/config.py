"""Typed settings loader for the terminal weather report."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    brightsky_base_url: AnyUrl = Field(
        default="https://api.brightsky.dev",
        alias="BRIGHTSKY_BASE_URL",
    )
    nominatim_base_url: AnyUrl = Field(
        default="https://nominatim.openstreetmap.org",
        alias="NOMINATIM_BASE_URL",
    )
    http_user_agent: str = Field(default="weather-cli", alias="HTTP_USER_AGENT")
    http_timeout_seconds: float = Field(default=15.0, alias="HTTP_TIMEOUT_SECONDS")

    forecast_days: int = Field(default=3, alias="FORECAST_DAYS")
    forecast_timezone: str | None = Field(default=None, alias="FORECAST_TIMEZONE")

    weather_default_lat: float | None = Field(default=None, alias="WEATHER_DEFAULT_LAT")
    weather_default_lon: float | None = Field(default=None, alias="WEATHER_DEFAULT_LON")
    weather_default_title: str = Field(default="Overview", alias="WEATHER_DEFAULT_TITLE")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        alias="LOG_LEVEL",
    )

    @field_validator(
        "weather_default_lat",
        "weather_default_lon",
        "forecast_timezone",
        mode="before",
    )
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat empty env-string values as unset."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Validate numeric ranges and paired default coordinates."""
        if not self.http_user_agent.strip():
            raise ValueError("HTTP_USER_AGENT must not be empty.")
        if self.http_timeout_seconds <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be > 0.")
        if not (1 <= self.forecast_days <= 10):
            raise ValueError("FORECAST_DAYS must be between 1 and 10.")

        has_default_lat = self.weather_default_lat is not None
        has_default_lon = self.weather_default_lon is not None
        if has_default_lat != has_default_lon:
            raise ValueError("WEATHER_DEFAULT_LAT and WEATHER_DEFAULT_LON must be set together.")
        if has_default_lat and not (-90 <= self.weather_default_lat <= 90):
            raise ValueError("WEATHER_DEFAULT_LAT must be between -90 and 90.")
        if has_default_lon and not (-180 <= self.weather_default_lon <= 180):
            raise ValueError("WEATHER_DEFAULT_LON must be between -180 and 180.")
        return self

    @property
    def has_default_location(self) -> bool:
        return self.weather_default_lat is not None and self.weather_default_lon is not None

    def safe_summary(self) -> dict[str, Any]:
        """Return a config summary suitable for debug logging."""
        return {
            "brightsky_base_url": str(self.brightsky_base_url),
            "nominatim_base_url": str(self.nominatim_base_url),
            "http_timeout_seconds": self.http_timeout_seconds,
            "forecast_days": self.forecast_days,
            "forecast_timezone": self.forecast_timezone,
            "has_default_location": self.has_default_location,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
