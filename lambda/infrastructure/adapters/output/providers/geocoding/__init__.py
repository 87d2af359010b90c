"""Geocoding Provider Package"""

from infrastructure.adapters.output.providers.geocoding.geopy_geocoding_client import GeopyGeocodingClient

__all__ = ['GeopyGeocodingClient']
