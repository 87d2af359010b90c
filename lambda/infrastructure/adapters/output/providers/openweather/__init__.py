"""OpenWeather Provider Package"""

from infrastructure.adapters.output.providers.openweather.openweather_client import OpenWeatherClient

__all__ = ['OpenWeatherClient']
