"""
Output Port: Interface para Cache Repository
Define contrato para implementações de cache (memória, DynamoDB, etc.)
"""
from typing import Callable, Protocol, TypeVar

T = TypeVar('T')


class ICacheRepository(Protocol):
    """
    Interface para repositório de cache com TTL

    Cada implementação deve declarar o que acontece quando duas chamadas
    concorrentes erram o cache para a mesma chave (serializa o producer
    ou tolera produção duplicada).
    """

    def fetch_or_compute(self, key: str, ttl_seconds: int, producer: Callable[[], T]) -> T:
        """
        Retorna o valor em cache ou executa o producer e grava o resultado

        Args:
            key: Chave do cache
            ttl_seconds: Tempo de vida do valor gravado
            producer: Função executada apenas em cache MISS

        Returns:
            Valor em cache (HIT) ou produzido agora (MISS)

        Raises:
            Qualquer exceção levantada pelo producer (nada é gravado)
        """
        ...

    def delete(self, key: str) -> bool:
        """
        Remove entrada do cache

        Args:
            key: Chave do cache

        Returns:
            True se removido com sucesso, False caso contrário
        """
        ...

    def is_enabled(self) -> bool:
        """
        Verifica se o cache está habilitado

        Returns:
            True se cache está ativo, False caso contrário
        """
        ...
