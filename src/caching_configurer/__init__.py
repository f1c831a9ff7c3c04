"""caching-configurer: resolução dos colaboradores da camada de cache.

Resolve, na inicialização do container, o cache manager, o cache resolver,
o key generator e o error handler usados pela camada de cache, a partir
dos atributos da diretiva de habilitação e de no máximo um
CachingConfigurer fornecido pelo usuário.

Uso básico:
    ```python
    from caching_configurer import CachingConfigurationResolver, CachingConfigurerSupport

    class AppCachingConfigurer(CachingConfigurerSupport):
        def cache_manager(self):
            return my_cache_manager

    resolver = CachingConfigurationResolver()
    configuration = resolver.resolve(import_metadata, [AppCachingConfigurer()])
    ```

Com defaults do framework e métricas OpenTelemetry:
    ```python
    from caching_configurer import CachingComponents, OpenTelemetryResolutionHooks

    resolver = CachingConfigurationResolver(hooks=OpenTelemetryResolutionHooks())
    components = CachingComponents.from_configuration(resolver.resolve(import_metadata, configurers))
    ```
"""

__version__ = "0.1.0"

# Atributos e opções da diretiva
from .attributes import EnableAttributes
from .constants import ENABLE_CACHING_ANNOTATION

# Defaults do framework
from .defaults import (
    CacheNotFoundError,
    CachingComponents,
    DefaultKeyGenerator,
    LoggingCacheErrorHandler,
    SimpleCacheErrorHandler,
    SimpleCacheResolver,
    SimpleKey,
)

# Exceções
from .exceptions import (
    AmbiguousConfigurerError,
    ConfigurationError,
    InvalidAttributeError,
    MissingDirectiveError,
)

# Observabilidade
from .observability import (
    CompositeResolutionHooks,
    DefaultResolutionHooks,
    OpenTelemetryResolutionHooks,
    SilentResolutionHooks,
)
from .options import AdviceMode, CachingOptions, CachingOptionsConfig

# Protocols (para extensibilidade)
from .protocols import (
    AnnotationMetadata,
    CacheErrorHandler,
    CacheManager,
    CacheResolver,
    CachingConfigurer,
    KeyGenerator,
    ResolutionHooks,
)

# Resolver principal
from .resolver import CachingConfigurationResolver, ResolutionState, ResolvedConfiguration
from .support import CachingConfigurerSupport

__all__ = [
    # Resolver principal
    "CachingConfigurationResolver",
    "ResolvedConfiguration",
    "ResolutionState",
    "CachingConfigurerSupport",
    # Atributos e opções
    "ENABLE_CACHING_ANNOTATION",
    "EnableAttributes",
    "AdviceMode",
    "CachingOptions",
    "CachingOptionsConfig",
    # Defaults
    "CachingComponents",
    "DefaultKeyGenerator",
    "SimpleKey",
    "SimpleCacheErrorHandler",
    "LoggingCacheErrorHandler",
    "SimpleCacheResolver",
    "CacheNotFoundError",
    # Exceções
    "ConfigurationError",
    "MissingDirectiveError",
    "AmbiguousConfigurerError",
    "InvalidAttributeError",
    # Observabilidade
    "DefaultResolutionHooks",
    "SilentResolutionHooks",
    "CompositeResolutionHooks",
    "OpenTelemetryResolutionHooks",
    # Protocols
    "AnnotationMetadata",
    "CacheManager",
    "CacheResolver",
    "KeyGenerator",
    "CacheErrorHandler",
    "CachingConfigurer",
    "ResolutionHooks",
]
