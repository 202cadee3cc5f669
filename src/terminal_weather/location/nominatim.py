"""Nominatim (OpenStreetMap) geocoder."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import Settings
from ..exceptions import GeocodingError
from .models import GeocodeMatch


class NominatimGeocoder:
    """Resolves free-text place names with the Nominatim search endpoint."""

    def __init__(self, settings: Settings, logger: logging.Logger) -> None:
        self.settings = settings
        self.logger = logger
        self._base_url = str(settings.nominatim_base_url).rstrip("/")
        self._client = httpx.Client(
            timeout=settings.http_timeout_seconds,
            headers={"User-Agent": settings.http_user_agent},
        )

    def __enter__(self) -> NominatimGeocoder:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def search(self, query: str) -> GeocodeMatch | None:
        """Return the best match for `query`, or None when nothing matches."""
        url = f"{self._base_url}/search"
        results = self._request_json(url, params={"q": query, "format": "json", "limit": 1})
        if not results:
            return None
        return self._parse_match(results[0])

    def _request_json(self, url: str, params: dict[str, Any]) -> list[Any]:
        self.logger.debug("Nominatim request %s q=%r", url, params.get("q"))
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise GeocodingError(
                f"Nominatim search failed with status {exc.response.status_code} at {url}."
            ) from exc
        except httpx.HTTPError as exc:
            raise GeocodingError(f"Nominatim search request failed at {url}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise GeocodingError(f"Nominatim returned non-JSON response at {url}.") from exc

        if not isinstance(payload, list):
            raise GeocodingError(
                f"Nominatim returned unexpected payload type {type(payload).__name__} at {url}."
            )
        return payload

    @staticmethod
    def _parse_match(item: Any) -> GeocodeMatch:
        if not isinstance(item, dict):
            raise GeocodingError("Nominatim result entry is not an object.")
        # Nominatim encodes coordinates as strings.
        lat_raw = item.get("lat")
        lon_raw = item.get("lon")
        display_name = item.get("display_name")
        if not isinstance(lat_raw, str) or not isinstance(lon_raw, str):
            raise GeocodingError("Nominatim result missing 'lat'/'lon' strings.")
        if not isinstance(display_name, str):
            raise GeocodingError("Nominatim result missing 'display_name'.")
        try:
            latitude = float(lat_raw)
            longitude = float(lon_raw)
        except ValueError as exc:
            raise GeocodingError(
                f"Nominatim returned non-numeric coordinates {lat_raw!r}, {lon_raw!r}."
            ) from exc
        return GeocodeMatch(latitude=latitude, longitude=longitude, display_name=display_name)
