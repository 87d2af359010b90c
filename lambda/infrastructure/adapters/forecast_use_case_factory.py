"""
Composition root - monta o ForecastByAddress use case a partir da configuração
Mantém singleton para reuso em execução quente da Lambda
"""
import logging
from typing import Optional

import requests
from geopy.geocoders import GoogleV3, Nominatim

from application.ports.output.cache_repository_port import ICacheRepository
from application.ports.output.geocoding_client_port import IGeocodingClient
from application.ports.output.weather_provider_port import IWeatherProvider
from application.use_cases.get_forecast_by_address_use_case import GetForecastByAddressUseCase
from domain.constants import Cache, Geocoding
from domain.entities.forecast import Forecast
from infrastructure.adapters.cache.dynamodb_cache_adapter import DynamoDBCacheAdapter
from infrastructure.adapters.cache.memory_cache_adapter import InMemoryCacheAdapter
from infrastructure.adapters.output.providers.geocoding import GeopyGeocodingClient
from infrastructure.adapters.output.providers.openweather import OpenWeatherClient
from shared.config.settings import AppConfig, CacheConfig, GeocodingConfig, WeatherConfig, load_app_config


def build_geocoding_client(config: GeocodingConfig) -> IGeocodingClient:
    """Cria o cliente de geocodificação para o provider configurado"""
    # geopy loga a URL da consulta (com o endereço) em DEBUG
    logging.getLogger('geopy').setLevel(logging.WARNING)

    if config.provider == Geocoding.PROVIDER_NOMINATIM:
        geocoder = Nominatim(user_agent=config.user_agent, timeout=config.timeout)
        # addressdetails traz 'address.postcode' no payload bruto
        return GeopyGeocodingClient(geocoder, timeout=config.timeout, geocode_kwargs={'addressdetails': True})

    geocoder = GoogleV3(api_key=config.api_key, timeout=config.timeout)
    return GeopyGeocodingClient(geocoder, timeout=config.timeout)


def build_weather_provider(config: WeatherConfig, http: Optional[requests.Session] = None) -> IWeatherProvider:
    """Cria o cliente OpenWeather"""
    return OpenWeatherClient(
        api_key=config.api_key,
        endpoint=config.endpoint,
        timeout=config.timeout,
        http=http
    )


def build_cache(config: CacheConfig) -> ICacheRepository:
    """Cria o cache do backend configurado"""
    if config.backend == Cache.BACKEND_DYNAMODB:
        return DynamoDBCacheAdapter(
            table_name=config.table_name,
            enabled=config.enabled,
            region_name=config.region_name,
            serializer=Forecast.to_dict,
            deserializer=Forecast.from_dict
        )
    return InMemoryCacheAdapter(enabled=config.enabled)


def build_forecast_by_address_use_case(config: AppConfig) -> GetForecastByAddressUseCase:
    """Monta o use case com todos os colaboradores já resolvidos"""
    return GetForecastByAddressUseCase(
        geocoding_client=build_geocoding_client(config.geocoding),
        weather_provider=build_weather_provider(config.weather),
        cache=build_cache(config.cache),
        cache_ttl_seconds=config.cache.ttl_seconds
    )


# Singleton global
_use_case_instance: Optional[GetForecastByAddressUseCase] = None


def get_forecast_by_address_use_case(config: Optional[AppConfig] = None) -> GetForecastByAddressUseCase:
    """
    Retorna singleton do use case (config do ambiente se None)
    Reutiliza cache em memória e sessão HTTP entre invocações Lambda (warm starts)
    """
    global _use_case_instance

    if _use_case_instance is None:
        _use_case_instance = build_forecast_by_address_use_case(config or load_app_config())

    return _use_case_instance


def reset_forecast_by_address_use_case() -> None:
    """Descarta o singleton (usado nos testes)"""
    global _use_case_instance
    _use_case_instance = None
