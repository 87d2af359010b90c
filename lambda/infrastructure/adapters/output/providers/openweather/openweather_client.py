"""OpenWeather Client - Implementação do provider para OpenWeather One Call API 3.0"""

from typing import Any, Dict, Optional

import requests
from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, Forecast as ForecastConstants
from domain.entities.forecast import Forecast
from domain.exceptions import WeatherProviderException
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper
from shared.config.logger_config import get_logger
from shared.utils.validators import CoordinatesValidator

logger = get_logger(child=True)


class OpenWeatherClient(IWeatherProvider):
    """
    Cliente fino para a OpenWeather One Call API 3.0

    Responsável por:
    - validar coordenadas
    - executar a chamada HTTP (síncrona, com timeout)
    - mapear o JSON em Forecast / DailyForecast
    - normalizar falhas conhecidas em WeatherProviderException

    Falhas desconhecidas (não HTTP, não timeout) são propagadas sem reclassificação.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = API.OPENWEATHER_ONECALL_URL,
        timeout: int = API.WEATHER_TIMEOUT,
        http: Optional[requests.Session] = None,
        extended_forecast_days: int = ForecastConstants.EXTENDED_FORECAST_DAYS
    ):
        """
        Inicializa o cliente

        Args:
            api_key: OpenWeather API key
            endpoint: URL do /onecall
            timeout: Timeout (segundos) de conexão e leitura
            http: Sessão HTTP (reutilizada entre invocações; nova se None)
            extended_forecast_days: Dias expostos na previsão estendida

        Raises:
            ValueError: Se API key não configurada
        """
        if not api_key:
            raise ValueError("OPENWEATHER_API_KEY não configurada")

        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self.http = http or requests.Session()
        self.extended_forecast_days = extended_forecast_days

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    @tracer.wrap(resource="openweather.fetch_by_coordinates")
    def fetch_by_coordinates(self, lat: float, lng: float) -> Forecast:
        """
        Busca condições atuais + previsão diária

        Args:
            lat: Latitude
            lng: Longitude

        Returns:
            Forecast entity

        Raises:
            ValueError: Se lat/lng ausentes
            WeatherProviderException: HTTP não-2xx ou timeout
        """
        CoordinatesValidator.validate(lat, lng)

        try:
            response = self.http.get(
                self.endpoint,
                params=self.build_query(lat, lng),
                timeout=self.timeout
            )
            return self._build_forecast(response)
        except requests.Timeout as ex:
            logger.error("Weather API timeout", error_kind=type(ex).__name__)
            raise WeatherProviderException("Weather API timeout") from ex

    def build_query(self, lat: float, lng: float) -> Dict[str, Any]:
        return {
            'lat': lat,
            'lon': lng,  # a API usa `lon`, internamente usamos `lng`
            'units': API.OPENWEATHER_UNITS,
            'exclude': API.OPENWEATHER_EXCLUDE,
            'appid': self.api_key
        }

    def _build_forecast(self, response: requests.Response) -> Forecast:
        self._ensure_success(response)
        return OpenWeatherDataMapper.map_onecall_to_forecast(
            response.json(),
            max_days=self.extended_forecast_days
        )

    @staticmethod
    def _ensure_success(response: requests.Response) -> None:
        if response.ok:
            return

        logger.error("Weather API HTTP error", status_code=response.status_code)
        raise WeatherProviderException(
            f"Weather API error (status {response.status_code})",
            details={"status_code": response.status_code}
        )
