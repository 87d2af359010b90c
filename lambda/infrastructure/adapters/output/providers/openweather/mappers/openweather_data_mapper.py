"""
OpenWeather Data Mapper - Transforma dados da API OpenWeather para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.constants import Forecast as ForecastConstants
from domain.entities.daily_forecast import DailyForecast
from domain.entities.forecast import Forecast


class OpenWeatherDataMapper:
    """
    Mapper para transformar respostas da One Call API 3.0 em entities de domínio

    Responsabilidade: Traduzir formato OpenWeather → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_onecall_to_forecast(
        data: Dict[str, Any],
        max_days: int = ForecastConstants.EXTENDED_FORECAST_DAYS
    ) -> Forecast:
        """
        Mapeia resposta /onecall para Forecast entity

        - current.temp / current.weather[0].description → condições atuais
        - daily[0].temp.max/min → máxima/mínima de hoje
        - daily[:max_days] → previsão estendida

        Args:
            data: Resposta raw da API (units=imperial)
            max_days: Quantidade máxima de dias na previsão estendida

        Returns:
            Forecast entity

        Raises:
            KeyError/IndexError: Se o payload não tiver 'current' ou 'daily'
        """
        current = data['current']
        daily = data['daily']
        today = daily[0]

        return Forecast(
            current_temp=current['temp'],
            current_description=OpenWeatherDataMapper._first_description(current),
            today_high=today['temp']['max'],
            today_low=today['temp']['min'],
            daily=tuple(OpenWeatherDataMapper.map_daily_to_forecasts(daily, max_days=max_days))
        )

    @staticmethod
    def map_daily_to_forecasts(
        daily: List[Dict[str, Any]],
        max_days: int = ForecastConstants.EXTENDED_FORECAST_DAYS
    ) -> List[DailyForecast]:
        """
        Mapeia os primeiros max_days itens de 'daily' mantendo a ordem da API

        Args:
            daily: Lista 'daily' da resposta One Call
            max_days: Limite de dias

        Returns:
            Lista de DailyForecast em ordem cronológica
        """
        return [
            DailyForecast(
                date=OpenWeatherDataMapper._epoch_to_date(item['dt']),
                high=item['temp']['max'],
                low=item['temp']['min'],
                description=OpenWeatherDataMapper._first_description(item)
            )
            for item in daily[:max_days]
        ]

    @staticmethod
    def _first_description(item: Dict[str, Any]) -> Optional[str]:
        weather = item.get('weather') or []
        if not weather:
            return None
        return weather[0].get('description')

    @staticmethod
    def _epoch_to_date(dt_unix: int):
        # 'dt' do daily é meio-dia local, a data UTC coincide com o dia da previsão
        return datetime.fromtimestamp(dt_unix, tz=timezone.utc).date()
