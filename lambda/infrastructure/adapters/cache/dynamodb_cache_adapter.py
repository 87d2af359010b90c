"""
Output Adapter: Implementação do Cache Repository usando DynamoDB
Armazena previsões serializadas em JSON com TTL
"""
import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Optional, Tuple

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from ddtrace import tracer

from application.ports.output.cache_repository_port import ICacheRepository
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DecimalEncoder(json.JSONEncoder):
    """Encoder JSON customizado para converter Decimal em float"""
    def default(self, obj):
        if isinstance(obj, Decimal):
            return float(obj)
        return super(DecimalEncoder, self).default(obj)


def _identity(value: Any) -> Any:
    return value


class DynamoDBCacheAdapter(ICacheRepository):
    """
    Implementação de cache usando DynamoDB

    Estrutura do item:
    {
        "cacheKey": "weather_by_zip/v1/94043",
        "data": "{ ... valor serializado em JSON ... }",
        "ttl": 1700593200,  # Unix timestamp
        "createdAt": "2025-11-21T10:00:00Z"
    }

    Falhas do DynamoDB (leitura/gravação) são logadas e degradam para
    "calcular sem cache"; exceções do producer sempre propagam.

    Concorrência: sem lock distribuído. MISS concorrentes na mesma chave
    executam o producer mais de uma vez; o último put_item vence.
    """

    def __init__(
        self,
        table_name: str,
        enabled: bool = True,
        region_name: str = 'us-east-1',
        serializer: Callable[[Any], Any] = _identity,
        deserializer: Callable[[Any], Any] = _identity,
        client: Optional[Any] = None
    ):
        """
        Inicializa o adapter de cache DynamoDB

        Args:
            table_name: Nome da tabela DynamoDB
            enabled: Se cache está habilitado
            region_name: Região AWS
            serializer: Converte o valor em estrutura JSON (ex.: Forecast.to_dict)
            deserializer: Reconstrói o valor a partir do JSON (ex.: Forecast.from_dict)
            client: Cliente boto3 pré-configurado (opcional)
        """
        self.table_name = table_name
        self.region_name = region_name
        self.enabled = enabled
        self.serializer = serializer
        self.deserializer = deserializer
        self.dynamodb_client = client

        if self.enabled and self.dynamodb_client is None:
            try:
                # Timeouts curtos: o cache nunca deve atrasar mais que o provider
                config = Config(
                    connect_timeout=2,
                    read_timeout=3,
                    retries={'max_attempts': 1}
                )
                self.dynamodb_client = boto3.client(
                    'dynamodb',
                    region_name=self.region_name,
                    config=config
                )
                logger.info("Cache DynamoDB inicializado", table=self.table_name)
            except (BotoCoreError, ClientError) as e:
                logger.error("Erro ao inicializar DynamoDB", error_kind=type(e).__name__)
                self.enabled = False

    def is_enabled(self) -> bool:
        """Verifica se cache está habilitado e operacional"""
        return self.enabled and self.dynamodb_client is not None

    @tracer.wrap(resource="cache.dynamodb.fetch_or_compute")
    def fetch_or_compute(self, key: str, ttl_seconds: int, producer: Callable[[], Any]) -> Any:
        if not self.is_enabled():
            return producer()

        found, value = self._get(key)
        if found:
            return value

        value = producer()
        self._set(key, value, ttl_seconds)
        return value

    def _get(self, key: str) -> Tuple[bool, Optional[Any]]:
        """
        Busca dados do cache

        Returns:
            (encontrado, valor) - expirado ou erro contam como MISS
        """
        now_ts = int(datetime.now(timezone.utc).timestamp())

        try:
            response = self.dynamodb_client.get_item(
                TableName=self.table_name,
                Key={'cacheKey': {'S': key}},
                ConsistentRead=False  # Leitura eventual é suficiente e mais barata/rápida
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Erro DynamoDB ao buscar cache", error_kind=type(e).__name__)
            return False, None

        item = response.get('Item')
        if not item:
            logger.debug("Cache MISS (dynamodb)")
            return False, None

        # DynamoDB pode demorar para excluir itens expirados
        ttl = int(item['ttl']['N']) if 'ttl' in item else None
        if ttl and ttl < now_ts:
            logger.debug("Cache EXPIRED (dynamodb)")
            return False, None

        data_json = item.get('data', {}).get('S')
        if not data_json:
            return False, None

        try:
            value = self.deserializer(json.loads(data_json))
        except (ValueError, KeyError, TypeError) as e:
            # Formato antigo/corrompido: tratar como MISS e sobrescrever
            logger.warning("Cache entry ilegível", error_kind=type(e).__name__)
            return False, None

        logger.debug("Cache HIT (dynamodb)")
        return True, value

    def _set(self, key: str, value: Any, ttl_seconds: int) -> bool:
        """
        Armazena dados no cache

        Returns:
            True se salvo com sucesso
        """
        now = datetime.now(timezone.utc)
        ttl_timestamp = int(now.timestamp()) + ttl_seconds

        item = {
            'cacheKey': {'S': key},
            'data': {'S': json.dumps(self.serializer(value), cls=DecimalEncoder, separators=(',', ':'))},
            'ttl': {'N': str(ttl_timestamp)},
            'createdAt': {'S': now.isoformat()}
        }

        try:
            self.dynamodb_client.put_item(TableName=self.table_name, Item=item)
        except (BotoCoreError, ClientError) as e:
            logger.error("Erro DynamoDB ao salvar cache", error_kind=type(e).__name__)
            return False

        logger.debug("Cache SET (dynamodb)", ttl_seconds=ttl_seconds)
        return True

    def delete(self, key: str) -> bool:
        """
        Remove entrada do cache

        Returns:
            True se removido com sucesso
        """
        if not self.is_enabled():
            return False

        try:
            self.dynamodb_client.delete_item(
                TableName=self.table_name,
                Key={'cacheKey': {'S': key}}
            )
            return True
        except (BotoCoreError, ClientError) as e:
            logger.error("Erro DynamoDB ao deletar cache", error_kind=type(e).__name__)
            return False
