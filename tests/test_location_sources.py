"""Tests for location source selection and resolution."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from terminal_weather.exceptions import ConfigError, GeocodingError, LocationNotFoundError
from terminal_weather.location.models import GeocodeMatch
from terminal_weather.location.sources import (
    OVERVIEW_TITLE,
    FixedCoordinateSource,
    NamedPlaceSource,
)

LOGGER = logging.getLogger("test_location_sources")


class _FakeGeocoder:
    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.queries: list[str] = []

    def search(self, query: str) -> GeocodeMatch | None:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.result


def test_named_place_uses_first_address_segment_as_title() -> None:
    geocoder = _FakeGeocoder(
        GeocodeMatch(
            latitude=48.1371,
            longitude=11.5754,
            display_name="München, Bayern, Deutschland",
        )
    )

    location = NamedPlaceSource("  Munich ", geocoder=geocoder, logger=LOGGER).resolve()

    assert geocoder.queries == ["Munich"]
    assert location.title == "München"
    assert location.latitude == 48.1371
    assert location.longitude == 11.5754


def test_named_place_without_match_raises_not_found() -> None:
    source = NamedPlaceSource("Atlantis", geocoder=_FakeGeocoder(None), logger=LOGGER)

    with pytest.raises(LocationNotFoundError, match="Could not find city: Atlantis"):
        source.resolve()


def test_geocoder_failure_collapses_to_not_found() -> None:
    geocoder = _FakeGeocoder(error=GeocodingError("Nominatim returned non-JSON response"))
    source = NamedPlaceSource("Berlin", geocoder=geocoder, logger=LOGGER)

    with pytest.raises(LocationNotFoundError) as exc_info:
        source.resolve()
    assert isinstance(exc_info.value.__cause__, GeocodingError)


def test_geocoder_failure_is_logged_below_warning(caplog: pytest.LogCaptureFixture) -> None:
    geocoder = _FakeGeocoder(error=GeocodingError("Nominatim search failed with status 503"))
    source = NamedPlaceSource("Berlin", geocoder=geocoder, logger=LOGGER)

    with caplog.at_level(logging.DEBUG, logger=LOGGER.name):
        with pytest.raises(LocationNotFoundError):
            source.resolve()

    assert [record.levelno for record in caplog.records] == [logging.DEBUG]
    assert caplog.records[0].query == "Berlin"


def test_empty_query_is_not_sent_to_geocoder() -> None:
    geocoder = _FakeGeocoder()

    with pytest.raises(LocationNotFoundError):
        NamedPlaceSource("   ", geocoder=geocoder, logger=LOGGER).resolve()
    assert geocoder.queries == []


def test_fixed_coordinates_default_to_overview_title() -> None:
    location = FixedCoordinateSource(52.52, 13.405).resolve()

    assert location.title == OVERVIEW_TITLE == "Overview"
    assert (location.latitude, location.longitude) == (52.52, 13.405)


@pytest.mark.parametrize(("lat", "lon"), [(-90.5, 0.0), (0.0, 180.5)])
def test_fixed_coordinates_validate_ranges(lat: float, lon: float) -> None:
    with pytest.raises(ConfigError):
        FixedCoordinateSource(lat, lon)
