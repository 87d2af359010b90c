"""
Output Adapter: Cache em memória com TTL
Cache do processo (reaproveitado em warm starts do Lambda)
"""
import time
from threading import RLock
from typing import Any, Callable, Dict, Optional, Tuple

from ddtrace import tracer

from application.ports.output.cache_repository_port import ICacheRepository
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class InMemoryCacheAdapter(ICacheRepository):
    """
    Cache chave-valor em memória com expiração por TTL

    Concorrência: o lock protege apenas o dicionário. O producer roda fora
    do lock, então duas chamadas concorrentes com MISS na mesma chave podem
    produzir o valor duas vezes; a última gravação vence.
    """

    def __init__(self, enabled: bool = True, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            enabled: Se False, todo fetch_or_compute executa o producer sem gravar
            clock: Relógio monotônico em segundos (injetável nos testes)
        """
        self.enabled = enabled
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}
        self._lock = RLock()

    def is_enabled(self) -> bool:
        """Verifica se cache está habilitado"""
        return self.enabled

    @tracer.wrap(resource="cache.memory.fetch_or_compute")
    def fetch_or_compute(self, key: str, ttl_seconds: int, producer: Callable[[], Any]) -> Any:
        if not self.is_enabled():
            return producer()

        found, value = self._get(key)
        if found:
            logger.debug("Cache HIT (memory)")
            return value

        logger.debug("Cache MISS (memory)")
        value = producer()
        self._set(key, value, ttl_seconds)
        return value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _get(self, key: str) -> Tuple[bool, Optional[Any]]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False, None
            value, expires_at = entry
            if expires_at <= now:
                # Expirou: remover para não acumular
                self._entries.pop(key, None)
                return False, None
            return True, value

    def _set(self, key: str, value: Any, ttl_seconds: int) -> None:
        now = self._clock()
        with self._lock:
            self._sweep_expired(now)
            self._entries[key] = (value, now + ttl_seconds)

    def _sweep_expired(self, now: float) -> None:
        """Remove entradas expiradas de ZIPs que não foram lidos de novo (chamado com o lock)"""
        expired = [key for key, (_, expires_at) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
