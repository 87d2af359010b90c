"""
Input Port: Interface para buscar a previsão do tempo a partir de um endereço
"""
from abc import ABC, abstractmethod

from domain.entities.forecast_result import ForecastResult


class IGetForecastByAddressUseCase(ABC):
    """Interface para caso de uso de previsão por endereço"""

    @abstractmethod
    def execute(self, address: str) -> ForecastResult:
        """
        Busca a previsão (possivelmente em cache) para um endereço livre

        Args:
            address: Endereço digitado pelo usuário

        Returns:
            ForecastResult: ZIP, previsão e se veio do cache

        Raises:
            InvalidAddressException: Se o endereço estiver em branco
            ForecastError: Para qualquer falha recuperável
        """
        pass
