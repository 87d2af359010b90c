"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions

Each exception carries a stable ``category`` used as the only detail that
reaches the logs on failure paths (address text and provider payloads never do).
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    category = "domain_error"

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidAddressException(DomainException):
    """Raised when the submitted address is blank"""
    category = "invalid_address"


class ForecastError(DomainException):
    """
    Public error of the forecast-by-address use case.
    Its message is user-safe and is shown verbatim by the caller.
    """
    category = "forecast_error"

    UNABLE_TO_FIND_ADDRESS = "Unable to find that address."
    UNABLE_TO_DETERMINE_ZIP = "Unable to determine ZIP code for that address."
    ERROR_RETRIEVING_FORECAST = "Error retrieving forecast."


class GeocodingException(DomainException):
    """Raised when the geocoding provider fails unexpectedly"""
    category = "geocoding_error"


class GeocodingNotFoundException(GeocodingException):
    """Raised when the geocoding provider returns no results"""
    category = "geocoding_not_found"


class WeatherProviderException(DomainException):
    """Raised when the weather provider answers with an error or times out"""
    category = "weather_provider_error"
