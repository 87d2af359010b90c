"""
Forecast Result - Resultado da busca de previsão por endereço, chaveada por ZIP
"""
from dataclasses import dataclass
from typing import Any, Dict

from domain.entities.forecast import Forecast


@dataclass(frozen=True)
class ForecastResult:
    """Saída do ForecastByAddressUseCase"""
    zip_code: str
    forecast: Forecast
    from_cache: bool

    def to_api_response(self) -> Dict[str, Any]:
        """Converte para formato de resposta da API"""
        return {
            'zipCode': self.zip_code,
            'fromCache': self.from_cache,
            'forecast': self.forecast.to_api_response()
        }
