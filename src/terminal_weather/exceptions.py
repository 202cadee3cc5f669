"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration or command-line input is invalid or incomplete."""


class LocationNotFoundError(Exception):
    """Raised when a place name cannot be resolved to coordinates."""


class GeocodingError(Exception):
    """Raised when geocoder requests fail or return malformed data."""


class WeatherProviderError(Exception):
    """Raised when forecast requests or normalization fail."""

    def __init__(
        self,
        message: str,
        *,
        category: str = "transport",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.status_code = status_code
