"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from aws_lambda_powertools.event_handler import Response

from domain.exceptions import ForecastError, InvalidAddressException
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas

    Mensagens de ForecastError são seguras para o usuário e vão verbatim;
    nada além da categoria do erro é logado.
    """
    logger = app_logger

    BLANK_ADDRESS_MESSAGE = "Please enter an address."

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_invalid_address(ex: InvalidAddressException) -> Response:
        """Handle 400 - Blank address"""
        ExceptionHandlerService.logger.warning("Invalid address", error_kind=ex.category)
        return Response(
            status_code=400,
            content_type="application/json",
            body=json.dumps({
                "type": "InvalidAddressException",
                "error": ExceptionHandlerService.BLANK_ADDRESS_MESSAGE
            })
        )

    @staticmethod
    def handle_forecast_error(ex: ForecastError) -> Response:
        """Handle 422 - Forecast could not be produced for the address"""
        ExceptionHandlerService.logger.warning("Forecast error", error_kind=ex.category)
        return Response(
            status_code=422,
            content_type="application/json",
            body=json.dumps({
                "type": "ForecastError",
                "error": ex.message
            })
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        # Sem exc_info: o traceback de erros HTTP carrega a URL (appid, lat/lon)
        ExceptionHandlerService.logger.error("Unexpected error", error_kind=type(ex).__name__)
        return Response(
            status_code=500,
            content_type="application/json",
            body=json.dumps({
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            })
        )
