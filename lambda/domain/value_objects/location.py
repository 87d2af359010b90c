"""
Value Object para a localização geocodificada de um endereço
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from domain.constants import Geo


@dataclass(frozen=True)
class Location:
    """
    Resultado da geocodificação de um endereço livre

    Características:
    - Imutável (frozen=True)
    - postal_code pode ser None: o use case decide que isso é fatal
    """
    latitude: float
    longitude: float
    postal_code: Optional[str] = None

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if self.latitude is not None and not (Geo.MIN_LATITUDE <= self.latitude <= Geo.MAX_LATITUDE):
            raise ValueError(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre {Geo.MIN_LATITUDE} e {Geo.MAX_LATITUDE} graus."
            )
        if self.longitude is not None and not (Geo.MIN_LONGITUDE <= self.longitude <= Geo.MAX_LONGITUDE):
            raise ValueError(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre {Geo.MIN_LONGITUDE} e {Geo.MAX_LONGITUDE} graus."
            )

    def has_postal_code(self) -> bool:
        """Verifica se a geocodificação resolveu um CEP/ZIP utilizável"""
        return bool(self.postal_code and self.postal_code.strip())

    def to_tuple(self) -> Tuple[float, float]:
        """
        Retorna coordenadas como tupla (lat, lon)

        Returns:
            Tupla (latitude, longitude)
        """
        return (self.latitude, self.longitude)
