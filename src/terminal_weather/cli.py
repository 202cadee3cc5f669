"""Command-line entry point: resolve a location, fetch, aggregate and print the report."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from rich.console import Console

from .config import Settings, load_settings
from .exceptions import (
    ConfigError,
    GeocodingError,
    LocationNotFoundError,
    WeatherProviderError,
)
from .location.nominatim import NominatimGeocoder
from .location.sources import FixedCoordinateSource, LocationSource, NamedPlaceSource
from .log_setup import setup_logger
from .report.aggregator import aggregate
from .report.renderer import ForecastReport
from .weather.brightsky import BrightSkyProvider
from .weather.models import ForecastWindow

EXIT_OK = 0
EXIT_CONFIG = 2
EXIT_LOCATION_NOT_FOUND = 3
EXIT_TRANSPORT = 4
EXIT_DECODE = 5
EXIT_UNEXPECTED = 99


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse weather report CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="terminal-weather",
        description="Print a colour-coded multi-day forecast for a city or fixed coordinates.",
    )
    parser.add_argument(
        "city",
        nargs="*",
        help="Place name to look up; prompted for on stderr when omitted.",
    )
    parser.add_argument("--lat", type=float, default=None, help="Fixed latitude.")
    parser.add_argument("--lon", type=float, default=None, help="Fixed longitude.")
    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Report title; only valid with --lat/--lon or default coordinates.",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Number of days to fetch, counted from the current hour.",
    )
    return parser.parse_args(argv)


def _now() -> datetime:
    return datetime.now()


def _prompt_city() -> str:
    print("City: ", end="", file=sys.stderr, flush=True)
    return sys.stdin.readline().strip()


def _reject_title(args: argparse.Namespace) -> None:
    if args.title is not None:
        raise ConfigError("--title only applies to fixed coordinates, not to a city name.")


def _select_location_source(
    args: argparse.Namespace,
    settings: Settings,
    geocoder: NominatimGeocoder,
    logger: logging.Logger,
) -> LocationSource:
    if (args.lat is None) != (args.lon is None):
        raise ConfigError("Use --lat and --lon together.")
    if args.lat is not None and args.lon is not None:
        if args.city:
            raise ConfigError("Use either a city name or --lat/--lon, not both.")
        return FixedCoordinateSource(
            args.lat,
            args.lon,
            title=args.title or settings.weather_default_title,
        )

    city = " ".join(args.city).strip()
    if city:
        _reject_title(args)
        return NamedPlaceSource(city, geocoder=geocoder, logger=logger)

    if settings.has_default_location:
        return FixedCoordinateSource(
            settings.weather_default_lat,
            settings.weather_default_lon,
            title=args.title or settings.weather_default_title,
        )
    _reject_title(args)
    return NamedPlaceSource(_prompt_city(), geocoder=geocoder, logger=logger)


def main() -> int:
    """Run one forecast lookup and print the report to stdout."""
    args = parse_args()
    logger = setup_logger()
    console = Console(force_terminal=True, color_system="standard", highlight=False)

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return EXIT_CONFIG
    logger.setLevel(settings.log_level)
    logger.debug("Loaded settings: %s", settings.safe_summary())

    days = args.days if args.days is not None else settings.forecast_days
    if not (1 <= days <= 10):
        logger.error("--days must be between 1 and 10.")
        return EXIT_CONFIG

    try:
        with NominatimGeocoder(settings=settings, logger=logger) as geocoder:
            source = _select_location_source(args, settings, geocoder, logger)
            logger.info(
                "Resolving location from %s", source.describe(), extra={"source": source.describe()}
            )
            location = source.resolve()

        now = _now()
        window = ForecastWindow.from_now(now, days=days)
        with BrightSkyProvider(settings=settings, logger=logger) as provider:
            snapshot = provider.fetch_hourly(
                latitude=location.latitude,
                longitude=location.longitude,
                window=window,
            )
    except ConfigError as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_CONFIG
    except (LocationNotFoundError, GeocodingError) as exc:
        logger.error("%s", exc)
        return EXIT_LOCATION_NOT_FOUND
    except WeatherProviderError as exc:
        logger.error(
            "Forecast failure (%s): %s",
            exc.category,
            exc,
            extra={"category": exc.category, "status_code": exc.status_code},
        )
        if exc.category == "decode":
            return EXIT_DECODE
        if exc.category == "input":
            return EXIT_CONFIG
        return EXIT_TRANSPORT
    except Exception as exc:  # pragma: no cover
        logger.exception("Unexpected weather CLI failure: %s", exc)
        return EXIT_UNEXPECTED

    today = now.date()
    summaries = aggregate(snapshot.observations, today)
    ForecastReport(console).render(summaries, today, location.title)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
