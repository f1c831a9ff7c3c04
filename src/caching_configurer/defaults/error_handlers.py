"""
Default cache error handlers.

Implementations of the CacheErrorHandler protocol used when no
CachingConfigurer provides one.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class SimpleCacheErrorHandler:
    """Error handler that re-raises every cache error.

    This is the framework default: cache failures surface to the caller.
    """

    def handle_cache_get_error(self, error: Exception, cache: Any, key: Any) -> None:
        raise error

    def handle_cache_put_error(self, error: Exception, cache: Any, key: Any, value: Any) -> None:
        raise error

    def handle_cache_evict_error(self, error: Exception, cache: Any, key: Any) -> None:
        raise error

    def handle_cache_clear_error(self, error: Exception, cache: Any) -> None:
        raise error


class LoggingCacheErrorHandler:
    """Error handler that logs cache errors and lets the operation continue.

    Useful when the cache is an optimization only: a failing cache then
    behaves like a cache miss.
    """

    def __init__(self, log_stack_traces: bool = False) -> None:
        """Initialize handler.

        Args:
            log_stack_traces: Include the traceback in each log record
        """
        self._log_stack_traces = log_stack_traces

    def handle_cache_get_error(self, error: Exception, cache: Any, key: Any) -> None:
        self._log("Cache '%s' failed to get entry with key '%s'", error, self._cache_name(cache), key)

    def handle_cache_put_error(self, error: Exception, cache: Any, key: Any, value: Any) -> None:
        self._log("Cache '%s' failed to put entry with key '%s'", error, self._cache_name(cache), key)

    def handle_cache_evict_error(self, error: Exception, cache: Any, key: Any) -> None:
        self._log("Cache '%s' failed to evict entry with key '%s'", error, self._cache_name(cache), key)

    def handle_cache_clear_error(self, error: Exception, cache: Any) -> None:
        self._log("Cache '%s' failed to clear entries", error, self._cache_name(cache))

    def _log(self, message: str, error: Exception, *args: Any) -> None:
        exc_info = (type(error), error, error.__traceback__) if self._log_stack_traces else None
        logger.warning(message + ": %s", *args, error, exc_info=exc_info)

    @staticmethod
    def _cache_name(cache: Any) -> str:
        return str(getattr(cache, "name", cache))
