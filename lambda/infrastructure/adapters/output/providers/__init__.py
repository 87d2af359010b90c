"""Infrastructure Providers - Implementações de geocodificação e clima"""

from infrastructure.adapters.output.providers.geocoding import GeopyGeocodingClient
from infrastructure.adapters.output.providers.openweather import OpenWeatherClient

__all__ = ['GeopyGeocodingClient', 'OpenWeatherClient']
