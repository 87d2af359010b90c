"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores fixos; o que varia por ambiente fica em shared/config/settings.py
"""


class API:
    """Constantes de APIs externas"""

    # OpenWeather One Call 3.0
    OPENWEATHER_ONECALL_URL = "https://api.openweathermap.org/data/3.0/onecall"
    OPENWEATHER_UNITS = "imperial"  # Fahrenheit / mph
    OPENWEATHER_EXCLUDE = "minutely,alerts"  # não usados, reduz o payload

    # Timeouts HTTP (segundos)
    WEATHER_TIMEOUT = 5
    GEOCODER_TIMEOUT = 15


class Geocoding:
    """Constantes de geocodificação"""

    PROVIDER_GOOGLE = "google"
    PROVIDER_NOMINATIM = "nominatim"
    SUPPORTED_PROVIDERS = (PROVIDER_GOOGLE, PROVIDER_NOMINATIM)

    DEFAULT_USER_AGENT = "weather-by-address"

    # Tipo do componente de endereço (formato Google) que carrega o CEP/ZIP
    POSTAL_CODE_TYPE = "postal_code"


class Cache:
    """Constantes de cache"""

    # Namespace versionado: mudar o formato do valor exige novo prefixo
    PREFIX_WEATHER_BY_ZIP = "weather_by_zip/v1/"

    TTL_FORECAST = 1800  # 30 minutos

    BACKEND_MEMORY = "memory"
    BACKEND_DYNAMODB = "dynamodb"
    SUPPORTED_BACKENDS = (BACKEND_MEMORY, BACKEND_DYNAMODB)


class Forecast:
    """Constantes de previsão"""

    # Dias expostos na previsão estendida
    EXTENDED_FORECAST_DAYS = 5


class Geo:
    """Constantes geográficas"""

    MIN_LATITUDE = -90
    MAX_LATITUDE = 90
    MIN_LONGITUDE = -180
    MAX_LONGITUDE = 180
