"""
Configurações centralizadas da aplicação
Lidas do ambiente uma única vez; o core recebe valores já resolvidos
"""
import os
from dataclasses import dataclass
from typing import Optional

from domain.constants import API, Cache, Geocoding

# Geocodificação
GEOCODER_PROVIDER = os.environ.get('GEOCODER_PROVIDER', Geocoding.PROVIDER_GOOGLE).lower()
GOOGLE_GEOCODING_API_KEY = os.environ.get('GOOGLE_GEOCODING_API_KEY')
GEOCODER_TIMEOUT = int(os.environ.get('GEOCODER_TIMEOUT', str(API.GEOCODER_TIMEOUT)))
GEOCODER_USER_AGENT = os.environ.get('GEOCODER_USER_AGENT', Geocoding.DEFAULT_USER_AGENT)

# Clima (OpenWeather One Call 3.0)
OPENWEATHER_API_KEY = os.environ.get('OPENWEATHER_API_KEY')
OPENWEATHER_ONECALL_URL = os.environ.get('OPENWEATHER_ONECALL_URL', API.OPENWEATHER_ONECALL_URL)
WEATHER_TIMEOUT = int(os.environ.get('WEATHER_TIMEOUT', str(API.WEATHER_TIMEOUT)))

# Cache (segundos)
FORECAST_CACHE_TTL_SECONDS = int(os.environ.get('FORECAST_CACHE_TTL_SECONDS', str(Cache.TTL_FORECAST)))
CACHE_BACKEND = os.environ.get('CACHE_BACKEND', Cache.BACKEND_MEMORY).lower()
CACHE_ENABLED = os.environ.get('CACHE_ENABLED', 'true').lower() in ('true', '1', 'yes')
CACHE_TABLE_NAME = os.environ.get('CACHE_TABLE_NAME', 'weather-by-zip-cache')

# AWS
AWS_REGION = os.environ.get('AWS_REGION', 'us-east-1')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')


@dataclass(frozen=True)
class GeocodingConfig:
    """Provider de geocodificação já resolvido"""
    provider: str
    api_key: Optional[str]
    timeout: int
    user_agent: str = Geocoding.DEFAULT_USER_AGENT

    def __post_init__(self):
        if self.provider not in Geocoding.SUPPORTED_PROVIDERS:
            raise ValueError(
                f"GEOCODER_PROVIDER inválido: {self.provider}. "
                f"Use um de {', '.join(Geocoding.SUPPORTED_PROVIDERS)}"
            )
        if self.provider == Geocoding.PROVIDER_GOOGLE and not self.api_key:
            raise ValueError("GOOGLE_GEOCODING_API_KEY não configurada")


@dataclass(frozen=True)
class WeatherConfig:
    """Endpoint e credencial do provider de clima"""
    api_key: str
    endpoint: str = API.OPENWEATHER_ONECALL_URL
    timeout: int = API.WEATHER_TIMEOUT

    def __post_init__(self):
        if not self.api_key:
            raise ValueError("OPENWEATHER_API_KEY não configurada")


@dataclass(frozen=True)
class CacheConfig:
    """Backend e TTL do cache de previsões"""
    ttl_seconds: int = Cache.TTL_FORECAST
    backend: str = Cache.BACKEND_MEMORY
    enabled: bool = True
    table_name: str = 'weather-by-zip-cache'
    region_name: str = 'us-east-1'

    def __post_init__(self):
        if self.backend not in Cache.SUPPORTED_BACKENDS:
            raise ValueError(
                f"CACHE_BACKEND inválido: {self.backend}. "
                f"Use um de {', '.join(Cache.SUPPORTED_BACKENDS)}"
            )
        if self.ttl_seconds <= 0:
            raise ValueError(f"FORECAST_CACHE_TTL_SECONDS deve ser positivo, recebeu {self.ttl_seconds}")


@dataclass(frozen=True)
class AppConfig:
    """Configuração completa usada pela composition root"""
    geocoding: GeocodingConfig
    weather: WeatherConfig
    cache: CacheConfig


def load_app_config() -> AppConfig:
    """
    Monta a configuração a partir das variáveis deste módulo

    Raises:
        ValueError: Se alguma chave obrigatória estiver ausente ou inválida
    """
    return AppConfig(
        geocoding=GeocodingConfig(
            provider=GEOCODER_PROVIDER,
            api_key=GOOGLE_GEOCODING_API_KEY,
            timeout=GEOCODER_TIMEOUT,
            user_agent=GEOCODER_USER_AGENT
        ),
        weather=WeatherConfig(
            api_key=OPENWEATHER_API_KEY,
            endpoint=OPENWEATHER_ONECALL_URL,
            timeout=WEATHER_TIMEOUT
        ),
        cache=CacheConfig(
            ttl_seconds=FORECAST_CACHE_TTL_SECONDS,
            backend=CACHE_BACKEND,
            enabled=CACHE_ENABLED,
            table_name=CACHE_TABLE_NAME,
            region_name=AWS_REGION
        )
    )
