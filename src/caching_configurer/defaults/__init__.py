"""
Framework defaults for unset collaborators.

Consumers of a ResolvedConfiguration use these to fill in whatever
the CachingConfigurer did not override.
"""

from .cache_resolver import CacheNotFoundError, SimpleCacheResolver
from .components import CachingComponents
from .error_handlers import LoggingCacheErrorHandler, SimpleCacheErrorHandler
from .key_generator import DefaultKeyGenerator, SimpleKey

__all__ = [
    "CacheNotFoundError",
    "CachingComponents",
    "DefaultKeyGenerator",
    "LoggingCacheErrorHandler",
    "SimpleCacheErrorHandler",
    "SimpleCacheResolver",
    "SimpleKey",
]
