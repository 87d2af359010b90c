"""
Daily Forecast Entity - Previsão de um único dia
Fonte: campo 'daily' da OpenWeather One Call API 3.0
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict


@dataclass(frozen=True)
class DailyForecast:
    """Previsão diária (temperaturas em Fahrenheit)"""
    date: date
    high: float
    low: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário serializável em JSON"""
        return {
            'date': self.date.isoformat(),
            'high': self.high,
            'low': self.low,
            'description': self.description
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DailyForecast':
        """Reconstrói a entidade a partir de to_dict()"""
        return cls(
            date=date.fromisoformat(data['date']),
            high=data['high'],
            low=data['low'],
            description=data['description']
        )

    def to_api_response(self) -> Dict[str, Any]:
        """Converte para formato de resposta da API (mesmas chaves do to_dict)"""
        return self.to_dict()
