"""
Geopy Geocoding Client
Envolve um geocoder do geopy (GoogleV3, Nominatim) atrás de uma interface pequena.
Retorna o value object Location e isola os chamadores dos detalhes do provider.
"""
from typing import Any, Dict, Optional

from ddtrace import tracer
from geopy.geocoders.base import Geocoder

from application.ports.output.geocoding_client_port import IGeocodingClient
from domain.constants import API, Geocoding
from domain.exceptions import GeocodingException, GeocodingNotFoundException
from domain.value_objects.location import Location
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GeopyGeocodingClient(IGeocodingClient):
    """Cliente de geocodificação baseado em geopy"""

    def __init__(
        self,
        geocoder: Geocoder,
        timeout: int = API.GEOCODER_TIMEOUT,
        geocode_kwargs: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            geocoder: Instância de geocoder do geopy já configurada (API key, user agent)
            timeout: Timeout (segundos) repassado ao geopy
            geocode_kwargs: Parâmetros extras por provider (ex.: addressdetails do Nominatim)
        """
        self.geocoder = geocoder
        self.timeout = timeout
        self.geocode_kwargs = geocode_kwargs or {}

    @property
    def provider_name(self) -> str:
        return type(self.geocoder).__name__

    @tracer.wrap(resource="geocoding.geocode")
    def geocode(self, address: str) -> Location:
        """
        Geocodifica o endereço usando o primeiro resultado do provider

        Raises:
            GeocodingNotFoundException: Nenhum resultado
            GeocodingException: Qualquer outra falha (exceção do geopy, payload malformado)
        """
        try:
            result = self._first_geocode_result(address)

            return Location(
                latitude=result.latitude,
                longitude=result.longitude,
                postal_code=self.safe_postal_code(result.raw)
            )
        except GeocodingNotFoundException:
            raise
        except Exception as ex:
            # Apenas a classe da exceção: mensagens do provider podem conter o endereço
            logger.error("Geocoding provider error", error_kind=type(ex).__name__)
            raise GeocodingException("Geocoding failed") from ex

    def _first_geocode_result(self, address: str):
        results = self.geocoder.geocode(
            address,
            exactly_one=False,
            timeout=self.timeout,
            **self.geocode_kwargs
        )
        if not results:
            raise GeocodingNotFoundException("No geocoding results")
        return results[0]

    @staticmethod
    def safe_postal_code(raw: Optional[Dict[str, Any]]) -> Optional[str]:
        """
        Deriva o CEP/ZIP do payload bruto do provider

        1. Campo direto ('postal_code', ou 'address.postcode' do Nominatim)
        2. Fallback: 'address_components' (formato Google) com type 'postal_code'

        Returns:
            CEP/ZIP ou None se ausente nos dois níveis
        """
        if not isinstance(raw, dict):
            return None

        direct = raw.get('postal_code')
        if not direct and isinstance(raw.get('address'), dict):
            direct = raw['address'].get('postcode')
        if direct:
            return direct

        components = raw.get('address_components')
        if not isinstance(components, list):
            return None

        for component in components:
            if Geocoding.POSTAL_CODE_TYPE in (component.get('types') or []):
                return component.get('long_name')
        return None
