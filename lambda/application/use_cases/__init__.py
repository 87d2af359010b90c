"""Application Use Cases"""
from .get_forecast_by_address_use_case import GetForecastByAddressUseCase

__all__ = [
    'GetForecastByAddressUseCase'
]
