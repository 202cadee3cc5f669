"""Location sources selected once at startup."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..exceptions import ConfigError, GeocodingError, LocationNotFoundError
from .models import ResolvedLocation
from .nominatim import NominatimGeocoder

OVERVIEW_TITLE = "Overview"


class LocationSource(ABC):
    """Produces the coordinates and report title for one run."""

    @abstractmethod
    def resolve(self) -> ResolvedLocation:
        """Return the location to forecast for."""

    def describe(self) -> str:
        return type(self).__name__


class NamedPlaceSource(LocationSource):
    """Resolves a free-text place name through the geocoder.

    Empty queries, empty results and geocoder failures all raise
    `LocationNotFoundError`.
    """

    def __init__(self, query: str, geocoder: NominatimGeocoder, logger: logging.Logger) -> None:
        self.query = query.strip()
        self.geocoder = geocoder
        self.logger = logger

    def resolve(self) -> ResolvedLocation:
        if not self.query:
            raise LocationNotFoundError(f"Could not find city: {self.query}")
        try:
            match = self.geocoder.search(self.query)
        except GeocodingError as exc:
            self.logger.debug(
                "Geocoding failed for %r: %s", self.query, exc, extra={"query": self.query}
            )
            raise LocationNotFoundError(f"Could not find city: {self.query}") from exc
        if match is None:
            raise LocationNotFoundError(f"Could not find city: {self.query}")
        return ResolvedLocation(
            latitude=match.latitude,
            longitude=match.longitude,
            title=match.short_name,
        )

    def describe(self) -> str:
        return f"named place {self.query!r}"


class FixedCoordinateSource(LocationSource):
    """Uses preconfigured coordinates without any lookup."""

    def __init__(self, latitude: float, longitude: float, title: str = OVERVIEW_TITLE) -> None:
        if not (-90 <= latitude <= 90):
            raise ConfigError(f"Invalid latitude {latitude}; expected between -90 and 90.")
        if not (-180 <= longitude <= 180):
            raise ConfigError(f"Invalid longitude {longitude}; expected between -180 and 180.")
        self.latitude = latitude
        self.longitude = longitude
        self.title = title

    def resolve(self) -> ResolvedLocation:
        return ResolvedLocation(latitude=self.latitude, longitude=self.longitude, title=self.title)

    def describe(self) -> str:
        return f"fixed coordinates ({self.latitude:.4f}, {self.longitude:.4f})"
