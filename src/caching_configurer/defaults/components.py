"""
Effective caching components for the interception pipeline.

Single responsibility: substitute framework defaults for every
collaborator a ResolvedConfiguration leaves unset.
"""

from dataclasses import dataclass

from ..protocols import CacheErrorHandler, CacheManager, CacheResolver, KeyGenerator
from ..resolver import ResolvedConfiguration
from .cache_resolver import SimpleCacheResolver
from .error_handlers import SimpleCacheErrorHandler
from .key_generator import DefaultKeyGenerator


@dataclass(frozen=True)
class CachingComponents:
    """Immutable set of collaborators with defaults applied.

    cache_manager and cache_resolver stay None when neither the
    configurer nor the caller provides a cache manager.
    """

    cache_manager: CacheManager | None
    cache_resolver: CacheResolver | None
    key_generator: KeyGenerator
    error_handler: CacheErrorHandler

    @classmethod
    def from_configuration(
        cls,
        configuration: ResolvedConfiguration,
        default_cache_manager: CacheManager | None = None,
    ) -> "CachingComponents":
        """Build components from a resolved configuration.

        Args:
            configuration: Result of the resolution
            default_cache_manager: Cache manager to use when none was configured

        Returns:
            Components with defaults substituted
        """
        cache_manager = configuration.cache_manager
        if cache_manager is None:
            cache_manager = default_cache_manager

        cache_resolver = configuration.cache_resolver
        if cache_resolver is None and cache_manager is not None:
            cache_resolver = SimpleCacheResolver(cache_manager)

        key_generator = configuration.key_generator
        if key_generator is None:
            key_generator = DefaultKeyGenerator()

        error_handler = configuration.error_handler
        if error_handler is None:
            error_handler = SimpleCacheErrorHandler()

        return cls(
            cache_manager=cache_manager,
            cache_resolver=cache_resolver,
            key_generator=key_generator,
            error_handler=error_handler,
        )
