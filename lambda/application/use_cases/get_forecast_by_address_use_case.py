"""
Use Case: Forecast by Address
Endereço livre -> previsão em cache, chaveada por ZIP

Valida, geocodifica, exige ZIP (chave de cache), busca o clima em cache MISS
e expõe um único erro de domínio (ForecastError).
"""
from typing import Tuple

from ddtrace import tracer

from application.ports.input.get_forecast_by_address_port import IGetForecastByAddressUseCase
from application.ports.output.cache_repository_port import ICacheRepository
from application.ports.output.geocoding_client_port import IGeocodingClient
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import Cache
from domain.entities.forecast import Forecast
from domain.entities.forecast_result import ForecastResult
from domain.exceptions import (
    ForecastError,
    GeocodingException,
    GeocodingNotFoundException,
    WeatherProviderException,
)
from domain.value_objects.location import Location
from shared.config.logger_config import get_logger
from shared.utils.validators import AddressValidator

logger = get_logger(child=True)


class GetForecastByAddressUseCase(IGetForecastByAddressUseCase):
    """Use case: resolve um endereço em previsão cacheada por ZIP"""

    def __init__(
        self,
        geocoding_client: IGeocodingClient,
        weather_provider: IWeatherProvider,
        cache: ICacheRepository,
        cache_ttl_seconds: int = Cache.TTL_FORECAST
    ):
        self.geocoding_client = geocoding_client
        self.weather_provider = weather_provider
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds

    @tracer.wrap(resource="use_case.get_forecast_by_address")
    def execute(self, address: str) -> ForecastResult:
        """
        Executa o use case

        Args:
            address: Endereço livre digitado pelo usuário

        Returns:
            ForecastResult com ZIP, previsão e flag de cache

        Raises:
            InvalidAddressException: Se endereço em branco (antes de qualquer chamada de rede)
            ForecastError: Qualquer falha de geocodificação, ZIP ou clima
        """
        address = AddressValidator.validate(address)

        location = self._geocode_address(address)
        zip_code = self._extract_zip(location)
        forecast, from_cache = self._fetch_forecast(location, zip_code)

        logger.info(
            "Forecast resolved",
            from_cache=from_cache,
            provider=self.weather_provider.provider_name
        )

        return ForecastResult(zip_code=zip_code, forecast=forecast, from_cache=from_cache)

    # Alias usado pela camada de entrada (submitAddress)
    call = execute

    def _geocode_address(self, address: str) -> Location:
        try:
            return self.geocoding_client.geocode(address)
        except GeocodingNotFoundException:
            raise ForecastError(ForecastError.UNABLE_TO_FIND_ADDRESS)
        except GeocodingException as ex:
            # Apenas a categoria: mensagens do provider podem repetir o endereço
            logger.error("Geocoding error", error_kind=ex.category)
            raise ForecastError(ForecastError.ERROR_RETRIEVING_FORECAST)

    @staticmethod
    def _extract_zip(location: Location) -> str:
        # Cache é chaveado por ZIP: sem ZIP não há como seguir
        if not location.has_postal_code():
            raise ForecastError(ForecastError.UNABLE_TO_DETERMINE_ZIP)
        return location.postal_code.strip()

    def _fetch_forecast(self, location: Location, zip_code: str) -> Tuple[Forecast, bool]:
        """
        Cache-aside por ZIP

        Returns:
            (forecast, from_cache) - from_cache é False quando o producer rodou nesta chamada
        """
        from_cache = True

        def produce() -> Forecast:
            nonlocal from_cache
            from_cache = False
            return self.weather_provider.fetch_by_coordinates(
                lat=location.latitude,
                lng=location.longitude
            )

        try:
            forecast = self.cache.fetch_or_compute(
                self.cache_key(zip_code),
                self.cache_ttl_seconds,
                produce
            )
        except WeatherProviderException as ex:
            logger.error("Weather error", error_kind=ex.category)
            raise ForecastError(ForecastError.ERROR_RETRIEVING_FORECAST)

        return forecast, from_cache

    @staticmethod
    def cache_key(zip_code: str) -> str:
        return f"{Cache.PREFIX_WEATHER_BY_ZIP}{zip_code}"
