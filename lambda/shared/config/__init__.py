"""Shared configuration"""
from .settings import FORECAST_CACHE_TTL_SECONDS, load_app_config
from .logger_config import get_logger, logger

__all__ = ['FORECAST_CACHE_TTL_SECONDS', 'load_app_config', 'get_logger', 'logger']
