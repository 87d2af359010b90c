"""
Logging estruturado (AWS Lambda Powertools)

O service name segue o Datadog (DD_SERVICE) para correlacionar logs e traces.
Regra de PII: endereços, ZIPs e payloads de providers nunca entram nos logs;
falhas registram apenas `error_kind`.
"""
import os
from typing import Optional

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'weather-by-address'


def _service_name() -> str:
    return (
        os.environ.get('DD_SERVICE')
        or os.environ.get('POWERTOOLS_SERVICE_NAME')
        or DEFAULT_SERVICE_NAME
    )


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Retorna Logger do Powertools

    Módulos usam child=True para herdar handler/contexto do logger raiz
    (inclusive o contexto injetado por inject_lambda_context).
    Nível via POWERTOOLS_LOG_LEVEL (padrão INFO).
    """
    return Logger(service=service_name or _service_name(), child=child)


# Logger raiz (lambda_handler / exception handlers)
logger = get_logger()
