"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Any, Type

from domain.exceptions import InvalidAddressException


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_not_empty(
        value: str,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """
        Valida se string não está vazia

        Args:
            value: String a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            String validada e trimmed

        Raises:
            exception_class: Se string vazia ou só com espaços
        """
        if value is None or not str(value).strip():
            raise exception_class(f"{param_name} must be present")
        return str(value).strip()

    @staticmethod
    def validate_present(*values: Any, param_name: str, exception_class: Type[Exception] = ValueError) -> None:
        """
        Valida se todos os valores foram informados (não None)

        Raises:
            exception_class: Se algum valor for None
        """
        if any(value is None for value in values):
            raise exception_class(f"{param_name} must be present")


class AddressValidator:
    """Validate free-form address input"""

    @staticmethod
    def validate(address: str) -> str:
        """
        Validate the address is non-blank after trimming

        Returns:
            The trimmed address

        Raises:
            InvalidAddressException: If address is blank
        """
        return GenericValidator.validate_not_empty(
            value=address,
            param_name="address",
            exception_class=InvalidAddressException
        )


class CoordinatesValidator:
    """Validate latitude/longitude presence"""

    @staticmethod
    def validate(lat: float, lng: float) -> None:
        """
        Raises:
            ValueError: If lat or lng is missing
        """
        GenericValidator.validate_present(lat, lng, param_name="latitude/longitude")
