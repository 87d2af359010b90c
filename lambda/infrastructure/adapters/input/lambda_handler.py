"""
Input Adapter: Lambda Handler HTTP
Presentation Layer: valida o formulário e delega para o use case
"""
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Domain Layer - Exceptions
from domain.exceptions import ForecastError, InvalidAddressException

# Infrastructure Layer - Adapters
from infrastructure.adapters.forecast_use_case_factory import get_forecast_by_address_use_case
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService

# Shared Layer
from shared.config.logger_config import get_logger
from shared.config.settings import CORS_ORIGIN

logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(InvalidAddressException)(exception_service.handle_invalid_address)
app.exception_handler(ForecastError)(exception_service.handle_forecast_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


# =============================
# Routes
# =============================

def _submit_address(address) -> dict:
    """
    Valida o campo e executa o use case

    Endereço em branco gera 400 sem tocar no use case (nem na rede).
    """
    if not isinstance(address, str) or not address.strip():
        raise InvalidAddressException("address must be present")

    result = get_forecast_by_address_use_case().execute(address.strip())
    return result.to_api_response()


@app.post("/api/forecasts")
def post_forecast_route():
    """
    POST /api/forecasts
    Body: { "address": "1600 Amphitheatre Parkway" }

    Returns zip code, cache flag and forecast for the address
    """
    try:
        body = app.current_event.json_body or {}
    except ValueError:
        # JSON inválido conta como endereço ausente
        body = {}
    return _submit_address(body.get('address') if isinstance(body, dict) else None)


@app.get("/api/forecasts")
def get_forecast_route():
    """
    GET /api/forecasts?address=1600+Amphitheatre+Parkway
    """
    address = app.current_event.get_query_string_value(name="address", default_value=None)
    return _submit_address(address)


# =============================
# Lambda Handler
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Available routes:
    - POST /api/forecasts   body {"address": "..."}
    - GET  /api/forecasts?address=...
    """
    # Nunca logar body/query: contêm o endereço
    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A')
    )

    response = app.resolve(event, context)

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response
