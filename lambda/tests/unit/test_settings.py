"""
Unit tests for settings.py
Tests configuration loading and environment variables
"""
import importlib
import os
from unittest.mock import patch

import pytest

from shared.config import settings
from shared.config.settings import AppConfig, CacheConfig, GeocodingConfig, WeatherConfig


@pytest.fixture
def reload_settings():
    """Recarrega settings com o ambiente corrente e restaura no final"""
    yield lambda: importlib.reload(settings)
    importlib.reload(settings)


class TestEnvironment:

    @patch.dict(os.environ, {
        'GEOCODER_PROVIDER': 'Nominatim',
        'OPENWEATHER_API_KEY': 'ow-key',
        'WEATHER_TIMEOUT': '7',
        'FORECAST_CACHE_TTL_SECONDS': '600',
        'CACHE_BACKEND': 'dynamodb',
        'CACHE_TABLE_NAME': 'test-cache',
        'CACHE_ENABLED': 'false',
        'AWS_REGION': 'us-west-2'
    })
    def test_settings_from_environment(self, reload_settings):
        module = reload_settings()

        assert module.GEOCODER_PROVIDER == 'nominatim'
        assert module.WEATHER_TIMEOUT == 7
        assert module.FORECAST_CACHE_TTL_SECONDS == 600
        assert module.CACHE_ENABLED is False

        config = module.load_app_config()

        assert config.geocoding.provider == 'nominatim'
        assert config.weather.api_key == 'ow-key'
        assert config.cache.backend == 'dynamodb'
        assert config.cache.table_name == 'test-cache'
        assert config.cache.region_name == 'us-west-2'

    @patch.dict(os.environ, {
        'GEOCODER_PROVIDER': 'google',
        'GOOGLE_GEOCODING_API_KEY': '',
        'OPENWEATHER_API_KEY': 'ow-key'
    })
    def test_missing_google_key_fails_fast(self, reload_settings):
        module = reload_settings()

        with pytest.raises(ValueError, match='GOOGLE_GEOCODING_API_KEY'):
            module.load_app_config()

    def test_defaults(self):
        assert settings.API.OPENWEATHER_ONECALL_URL == 'https://api.openweathermap.org/data/3.0/onecall'
        assert CacheConfig().ttl_seconds == 1800
        assert CacheConfig().backend == 'memory'


class TestConfigValidation:

    def test_unknown_geocoder_provider(self):
        with pytest.raises(ValueError, match='GEOCODER_PROVIDER'):
            GeocodingConfig(provider='bing', api_key='k', timeout=15)

    def test_nominatim_needs_no_key(self):
        assert GeocodingConfig(provider='nominatim', api_key=None, timeout=15).api_key is None

    def test_missing_weather_key(self):
        with pytest.raises(ValueError, match='OPENWEATHER_API_KEY'):
            WeatherConfig(api_key=None)

    def test_unknown_cache_backend(self):
        with pytest.raises(ValueError, match='CACHE_BACKEND'):
            CacheConfig(backend='redis')

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_non_positive_ttl(self, ttl):
        with pytest.raises(ValueError, match='FORECAST_CACHE_TTL_SECONDS'):
            CacheConfig(ttl_seconds=ttl)

    def test_app_config_is_immutable(self):
        config = AppConfig(
            geocoding=GeocodingConfig(provider='nominatim', api_key=None, timeout=15),
            weather=WeatherConfig(api_key='k'),
            cache=CacheConfig()
        )

        with pytest.raises(AttributeError):
            config.cache = None
