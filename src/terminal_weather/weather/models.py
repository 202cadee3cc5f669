"""Typed models for hourly forecast observations."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONDITION = "dry"


class HourlyObservation(BaseModel):
    """One hourly weather record for a location."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    timestamp: datetime
    temperature: float
    precipitation_probability: float | None = None
    condition: str = DEFAULT_CONDITION

    @field_validator("condition", mode="before")
    @classmethod
    def null_condition_is_dry(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_CONDITION
        return value

    @property
    def day_key(self) -> date:
        """Calendar date as written by the source, without timezone conversion."""
        return self.timestamp.date()

    @property
    def hour_label(self) -> str:
        return self.timestamp.strftime("%H:%M")


class ForecastWindow(BaseModel):
    """Local-time range requested from the forecast source."""

    start: datetime
    end: datetime

    @classmethod
    def from_now(cls, now: datetime, days: int = 3) -> ForecastWindow:
        """Start at the current hour and extend `days` forward."""
        start = now.replace(minute=0, second=0, microsecond=0)
        return cls(start=start, end=start + timedelta(days=days))

    @staticmethod
    def format_bound(value: datetime) -> str:
        return value.strftime("%Y-%m-%dT%H:00")


class ForecastSnapshot(BaseModel):
    """Normalized provider response for one location."""

    provider: str
    retrieval_timestamp: datetime
    source_url: str
    latitude: float
    longitude: float
    window: ForecastWindow
    observations: list[HourlyObservation] = Field(default_factory=list)
