"""
Forecast Entity - Previsão agregada exposta ao usuário:
- condições atuais
- máxima/mínima de hoje
- previsão de vários dias
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from domain.entities.daily_forecast import DailyForecast


@dataclass(frozen=True)
class Forecast:
    """Previsão produzida uma vez por chamada ao provider de clima"""
    current_temp: float
    current_description: str
    today_high: float
    today_low: float
    daily: Tuple[DailyForecast, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Listas viram tupla para manter a entidade imutável
        if not isinstance(self.daily, tuple):
            object.__setattr__(self, 'daily', tuple(self.daily))

    def to_dict(self) -> Dict[str, Any]:
        """
        Converte para dicionário serializável em JSON

        Usado pelos caches que persistem JSON (DynamoDB)
        """
        return {
            'current_temp': self.current_temp,
            'current_description': self.current_description,
            'today_high': self.today_high,
            'today_low': self.today_low,
            'daily': [day.to_dict() for day in self.daily]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Forecast':
        """Reconstrói a entidade a partir de to_dict()"""
        return cls(
            current_temp=data['current_temp'],
            current_description=data['current_description'],
            today_high=data['today_high'],
            today_low=data['today_low'],
            daily=tuple(DailyForecast.from_dict(day) for day in data.get('daily', []))
        )

    def to_api_response(self) -> Dict[str, Any]:
        """Converte para formato de resposta da API (camelCase)"""
        return {
            'currentTemp': self.current_temp,
            'currentDescription': self.current_description,
            'todayHigh': self.today_high,
            'todayLow': self.today_low,
            'daily': [day.to_api_response() for day in self.daily]
        }
