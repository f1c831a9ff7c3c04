"""
Default cache resolver backed by a CacheManager.
"""

from collections.abc import Collection
from typing import Any

from ..protocols import CacheManager


class CacheNotFoundError(LookupError):
    """A cache name could not be resolved by the cache manager."""

    def __init__(self, cache_name: str, cache_manager: CacheManager) -> None:
        self.cache_name = cache_name
        super().__init__(f"Cannot find cache named '{cache_name}' in {type(cache_manager).__name__}")


class SimpleCacheResolver:
    """Resolves caches by name through a single CacheManager."""

    def __init__(self, cache_manager: CacheManager) -> None:
        self._cache_manager = cache_manager

    @property
    def cache_manager(self) -> CacheManager:
        """Cache manager used for lookups."""
        return self._cache_manager

    def resolve_caches(self, cache_names: Collection[str]) -> Collection[Any]:
        """Resolve each name to its cache.

        Args:
            cache_names: Cache names declared by the operation

        Returns:
            List of caches, in the same order as the names

        Raises:
            CacheNotFoundError: If the manager does not know a name
        """
        caches = []
        for name in cache_names:
            cache = self._cache_manager.get_cache(name)
            if cache is None:
                raise CacheNotFoundError(name, self._cache_manager)
            caches.append(cache)
        return caches
