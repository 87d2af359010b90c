"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod

from domain.entities.forecast import Forecast


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    A aplicação usa apenas OpenWeather, mas mantemos a interface
    para facilitar troca futura de fonte.
    """

    @abstractmethod
    def fetch_by_coordinates(self, lat: float, lng: float) -> Forecast:
        """
        Busca condições atuais e previsão de vários dias

        Args:
            lat: Latitude da localização
            lng: Longitude da localização

        Returns:
            Forecast entity

        Raises:
            ValueError: Se lat/lng ausentes
            WeatherProviderException: Se o provider falhar (HTTP ou timeout)
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeather')"""
        pass
