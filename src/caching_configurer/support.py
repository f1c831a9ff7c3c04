"""Implementação base de CachingConfigurer."""

from .protocols import CacheErrorHandler, CacheManager, CacheResolver, KeyGenerator


class CachingConfigurerSupport:
    """CachingConfigurer em que todos os accessors retornam None.

    Sobrescreva apenas os colaboradores que deseja customizar; os demais
    continuam usando os defaults do framework.
    """

    def cache_manager(self) -> CacheManager | None:
        return None

    def cache_resolver(self) -> CacheResolver | None:
        return None

    def key_generator(self) -> KeyGenerator | None:
        return None

    def error_handler(self) -> CacheErrorHandler | None:
        return None
