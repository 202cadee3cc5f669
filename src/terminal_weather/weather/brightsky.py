"""Bright Sky (api.brightsky.dev) hourly forecast provider."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..exceptions import WeatherProviderError
from .base import WeatherProvider
from .models import ForecastSnapshot, ForecastWindow, HourlyObservation


class BrightSkyProvider(WeatherProvider):
    """Fetches hourly DWD forecast records from the Bright Sky JSON API.

    A single attempt is made per request; any failure is surfaced to the
    caller as `WeatherProviderError`.
    """

    provider_name = "brightsky"

    def __init__(self, settings: Settings, logger: logging.Logger) -> None:
        self.settings = settings
        self.logger = logger
        self._base_url = str(settings.brightsky_base_url).rstrip("/")
        self._client = httpx.Client(
            timeout=settings.http_timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.http_user_agent,
            },
        )

    def __enter__(self) -> BrightSkyProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_hourly(
        self,
        *,
        latitude: float,
        longitude: float,
        window: ForecastWindow,
    ) -> ForecastSnapshot:
        """Fetch hourly records between the window bounds (inclusive start)."""
        self._validate_coordinates(latitude, longitude)

        url = f"{self._base_url}/weather"
        params: dict[str, Any] = {
            "lat": latitude,
            "lon": longitude,
            "date": ForecastWindow.format_bound(window.start),
            "last_date": ForecastWindow.format_bound(window.end),
        }
        if self.settings.forecast_timezone:
            params["tz"] = self.settings.forecast_timezone

        payload = self._request_json(url, params=params)
        observations = self._normalize_observations(payload)
        self.logger.info(
            "Bright Sky returned %d hourly records for (%.4f, %.4f)",
            len(observations),
            latitude,
            longitude,
        )
        return ForecastSnapshot(
            provider=self.provider_name,
            retrieval_timestamp=datetime.now(UTC),
            source_url=url,
            latitude=latitude,
            longitude=longitude,
            window=window,
            observations=observations,
        )

    @staticmethod
    def _validate_coordinates(latitude: float, longitude: float) -> None:
        if not (-90 <= latitude <= 90):
            raise WeatherProviderError(
                f"Invalid latitude {latitude}; expected between -90 and 90.",
                category="input",
            )
        if not (-180 <= longitude <= 180):
            raise WeatherProviderError(
                f"Invalid longitude {longitude}; expected between -180 and 180.",
                category="input",
            )

    def _request_json(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        self.logger.debug("Bright Sky request %s params=%s", url, params)
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise WeatherProviderError(
                f"Bright Sky forecast fetch failed with status {status} "
                f"at {url}: {exc.response.text[:300]}",
                category="transport",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise WeatherProviderError(
                f"Bright Sky forecast request failed at {url}: {exc}",
                category="transport",
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise WeatherProviderError(
                f"Bright Sky returned non-JSON response at {url}.",
                category="decode",
            ) from exc

        if not isinstance(payload, dict):
            raise WeatherProviderError(
                f"Bright Sky returned unexpected payload type {type(payload).__name__} at {url}.",
                category="decode",
            )
        return payload

    def _normalize_observations(self, payload: dict[str, Any]) -> list[HourlyObservation]:
        raw_records = payload.get("weather")
        if not isinstance(raw_records, list):
            raise WeatherProviderError(
                "Bright Sky payload missing 'weather' list.",
                category="decode",
            )

        observations: list[HourlyObservation] = []
        for index, record in enumerate(raw_records):
            try:
                observations.append(HourlyObservation.model_validate(record))
            except ValidationError as exc:
                raise WeatherProviderError(
                    f"Bright Sky record {index} is malformed: {exc.errors()[0]['msg']}",
                    category="decode",
                ) from exc
        return observations
