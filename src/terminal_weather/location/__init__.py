"""Location resolution for the forecast lookup."""

from .models import GeocodeMatch, ResolvedLocation
from .nominatim import NominatimGeocoder
from .sources import FixedCoordinateSource, LocationSource, NamedPlaceSource

__all__ = [
    "FixedCoordinateSource",
    "GeocodeMatch",
    "LocationSource",
    "NamedPlaceSource",
    "NominatimGeocoder",
    "ResolvedLocation",
]
