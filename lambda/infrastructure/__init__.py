"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de providers, cache e composição
"""

from infrastructure.adapters.cache.dynamodb_cache_adapter import DynamoDBCacheAdapter
from infrastructure.adapters.cache.memory_cache_adapter import InMemoryCacheAdapter
from infrastructure.adapters.output.providers import GeopyGeocodingClient, OpenWeatherClient

__all__ = [
    'DynamoDBCacheAdapter',
    'InMemoryCacheAdapter',
    'GeopyGeocodingClient',
    'OpenWeatherClient'
]
