"""
Output Port: Geocoding Client
Contrato para provedores de geocodificação (endereço livre -> Location)
"""
from abc import ABC, abstractmethod

from domain.value_objects.location import Location


class IGeocodingClient(ABC):
    """Interface para clientes de geocodificação"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: GoogleV3)"""
        raise NotImplementedError

    @abstractmethod
    def geocode(self, address: str) -> Location:
        """
        Resolve um endereço livre em coordenadas e CEP/ZIP

        Args:
            address: Endereço digitado pelo usuário

        Returns:
            Location (postal_code pode ser None)

        Raises:
            GeocodingNotFoundException: Se o provider não retornar resultados
            GeocodingException: Para qualquer outra falha do provider
        """
        raise NotImplementedError
