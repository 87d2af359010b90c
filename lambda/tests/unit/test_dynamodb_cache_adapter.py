"""
Testes Unitários - DynamoDBCacheAdapter
Cliente boto3 mockado; falhas do DynamoDB degradam para MISS
"""
import json
import time
from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from domain.entities.daily_forecast import DailyForecast
from domain.entities.forecast import Forecast
from infrastructure.adapters.cache.dynamodb_cache_adapter import DynamoDBCacheAdapter

TABLE = 'weather-by-zip-cache'
KEY = 'weather_by_zip/v1/99999'


def client_error(operation: str) -> ClientError:
    return ClientError(
        {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'slow down'}},
        operation
    )


def stored_item(data, ttl_offset: int = 600) -> dict:
    return {
        'Item': {
            'cacheKey': {'S': KEY},
            'data': {'S': json.dumps(data)},
            'ttl': {'N': str(int(time.time()) + ttl_offset)},
            'createdAt': {'S': '2025-11-20T10:00:00+00:00'}
        }
    }


@pytest.fixture
def dynamodb_client():
    client = MagicMock()
    client.get_item.return_value = {}
    return client


@pytest.fixture
def cache(dynamodb_client):
    return DynamoDBCacheAdapter(
        table_name=TABLE,
        serializer=Forecast.to_dict,
        deserializer=Forecast.from_dict,
        client=dynamodb_client
    )


class TestFetchOrCompute:

    def test_miss_produces_and_puts_item(self, cache, dynamodb_client, make_forecast, sample_daily):
        forecast = make_forecast(daily=sample_daily)

        result = cache.fetch_or_compute(KEY, 1800, lambda: forecast)

        assert result == forecast
        dynamodb_client.get_item.assert_called_once_with(
            TableName=TABLE,
            Key={'cacheKey': {'S': KEY}},
            ConsistentRead=False
        )
        put_kwargs = dynamodb_client.put_item.call_args.kwargs
        item = put_kwargs['Item']
        assert put_kwargs['TableName'] == TABLE
        assert item['cacheKey'] == {'S': KEY}
        assert json.loads(item['data']['S']) == forecast.to_dict()
        assert int(item['ttl']['N']) == pytest.approx(int(time.time()) + 1800, abs=5)
        assert 'createdAt' in item

    def test_hit_returns_deserialized_value_without_producing(self, cache, dynamodb_client, make_forecast, sample_daily):
        forecast = make_forecast(daily=sample_daily)
        dynamodb_client.get_item.return_value = stored_item(forecast.to_dict())
        producer = MagicMock()

        result = cache.fetch_or_compute(KEY, 1800, producer)

        assert result == forecast
        assert result.daily[0].date == date(2025, 11, 20)
        producer.assert_not_called()
        dynamodb_client.put_item.assert_not_called()

    def test_expired_item_is_a_miss(self, cache, dynamodb_client, make_forecast):
        dynamodb_client.get_item.return_value = stored_item(make_forecast().to_dict(), ttl_offset=-10)
        fresh = make_forecast(current_temp=50.0)

        assert cache.fetch_or_compute(KEY, 1800, lambda: fresh) == fresh
        dynamodb_client.put_item.assert_called_once()

    def test_unreadable_item_is_a_miss(self, cache, dynamodb_client, make_forecast):
        dynamodb_client.get_item.return_value = stored_item({'unexpected': 'shape'})
        fresh = make_forecast()

        assert cache.fetch_or_compute(KEY, 1800, lambda: fresh) == fresh

    @pytest.mark.parametrize("error", [client_error('GetItem'), EndpointConnectionError(endpoint_url='http://x')])
    def test_get_failure_degrades_to_producer(self, cache, dynamodb_client, make_forecast, error):
        dynamodb_client.get_item.side_effect = error
        fresh = make_forecast()

        assert cache.fetch_or_compute(KEY, 1800, lambda: fresh) == fresh

    def test_put_failure_still_returns_value(self, cache, dynamodb_client, make_forecast):
        dynamodb_client.put_item.side_effect = client_error('PutItem')
        fresh = make_forecast()

        assert cache.fetch_or_compute(KEY, 1800, lambda: fresh) == fresh

    def test_producer_exception_propagates_without_put(self, cache, dynamodb_client):
        def failing():
            raise RuntimeError('boom')

        with pytest.raises(RuntimeError):
            cache.fetch_or_compute(KEY, 1800, failing)

        dynamodb_client.put_item.assert_not_called()

    def test_disabled_cache_skips_dynamodb(self, dynamodb_client, make_forecast):
        cache = DynamoDBCacheAdapter(table_name=TABLE, enabled=False, client=dynamodb_client)
        fresh = make_forecast()

        assert cache.fetch_or_compute(KEY, 1800, lambda: fresh) == fresh
        dynamodb_client.get_item.assert_not_called()
        dynamodb_client.put_item.assert_not_called()


class TestDelete:

    def test_delete(self, cache, dynamodb_client):
        assert cache.delete(KEY) is True
        dynamodb_client.delete_item.assert_called_once_with(TableName=TABLE, Key={'cacheKey': {'S': KEY}})

    def test_delete_failure(self, cache, dynamodb_client):
        dynamodb_client.delete_item.side_effect = client_error('DeleteItem')

        assert cache.delete(KEY) is False


class TestClientCreation:

    @patch('infrastructure.adapters.cache.dynamodb_cache_adapter.boto3')
    def test_creates_boto3_client_when_not_injected(self, mock_boto3):
        cache = DynamoDBCacheAdapter(table_name=TABLE, region_name='us-west-2')

        assert cache.is_enabled()
        args, kwargs = mock_boto3.client.call_args
        assert args == ('dynamodb',)
        assert kwargs['region_name'] == 'us-west-2'

    @patch('infrastructure.adapters.cache.dynamodb_cache_adapter.boto3')
    def test_disabled_cache_does_not_create_client(self, mock_boto3):
        DynamoDBCacheAdapter(table_name=TABLE, enabled=False)

        mock_boto3.client.assert_not_called()
