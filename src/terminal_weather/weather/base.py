"""Provider-agnostic forecast interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import ForecastSnapshot, ForecastWindow


class WeatherProvider(ABC):
    """Base contract for hourly forecast sources."""

    @abstractmethod
    def fetch_hourly(
        self,
        *,
        latitude: float,
        longitude: float,
        window: ForecastWindow,
    ) -> ForecastSnapshot:
        """Fetch and normalize hourly observations for a coordinate and time range."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
