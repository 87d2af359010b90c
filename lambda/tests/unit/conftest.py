"""
Configurações e fixtures compartilhadas para testes unitários
"""
import json
import os
from pathlib import Path

# Sem agente Datadog nos testes
os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('POWERTOOLS_LOG_LEVEL', 'DEBUG')

import pytest

from domain.entities.daily_forecast import DailyForecast
from domain.entities.forecast import Forecast
from domain.value_objects.location import Location

FIXTURES_PATH = Path(__file__).parent.parent / 'fixtures'


@pytest.fixture
def onecall_payload():
    """Resposta real (anonimizada) da One Call API 3.0 com units=imperial e 8 dias"""
    with open(FIXTURES_PATH / 'openweather_one_call_sample.json') as f:
        return json.load(f)


@pytest.fixture
def make_forecast():
    """
    Factory fixture para criar Forecast com valores padrão

    Usage:
        def test_something(make_forecast):
            forecast = make_forecast(current_temp=68.0)
    """
    def _make(
        current_temp: float = 72.5,
        current_description: str = 'clear sky',
        today_high: float = 78.0,
        today_low: float = 65.0,
        daily=()
    ) -> Forecast:
        return Forecast(
            current_temp=current_temp,
            current_description=current_description,
            today_high=today_high,
            today_low=today_low,
            daily=daily
        )

    return _make


@pytest.fixture
def sample_daily():
    from datetime import date
    return (
        DailyForecast(date=date(2025, 11, 20), high=72.5, low=52.3, description='clear sky'),
        DailyForecast(date=date(2025, 11, 21), high=68.9, low=50.1, description='scattered clouds'),
    )


@pytest.fixture
def location():
    return Location(latitude=38.6237, longitude=-90.5924, postal_code='99999')


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weather-by-address'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:weather-by-address'
        self.memory_limit_in_mb = '256'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weather-by-address'
        self.log_stream_name = '2025/11/20/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext"""
    return MockContext()
