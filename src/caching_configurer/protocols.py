"""Protocols para extensibilidade da biblioteca.

Define as interfaces dos colaboradores resolvidos na inicialização:
- CacheManager / CacheResolver: acesso às caches (implementações externas)
- KeyGenerator: geração de chaves de cache
- CacheErrorHandler: tratamento de erros das operações de cache
- CachingConfigurer: objeto opcional que sobrescreve os defaults
- AnnotationMetadata: metadados da classe importadora
- ResolutionHooks: callbacks de observabilidade da resolução
"""

from collections.abc import Collection, Mapping
from typing import Any, Protocol


class CacheManager(Protocol):
    """Protocol para gerenciadores de cache.

    O comportamento é opaco para o resolver, que apenas guarda a referência.
    """

    def get_cache(self, name: str) -> Any | None:
        """Retorna a cache com o nome informado ou None se não existir."""
        ...

    def get_cache_names(self) -> Collection[str]:
        """Retorna os nomes das caches conhecidas por este gerenciador."""
        ...


class CacheResolver(Protocol):
    """Protocol para resolução das caches de uma operação."""

    def resolve_caches(self, cache_names: Collection[str]) -> Collection[Any]:
        """Resolve as caches a usar para os nomes informados.

        Args:
            cache_names: Nomes declarados na operação de cache

        Returns:
            Caches resolvidas, na mesma ordem dos nomes
        """
        ...


class KeyGenerator(Protocol):
    """Protocol para geradores de chaves de cache.

    Example:
        ```python
        class MyKeyGenerator:
            def generate(self, target, method, *params):
                return f"{type(target).__name__}.{method.__name__}:{params}"
        ```
    """

    def generate(self, target: Any, method: Any, *params: Any) -> Any:
        """Gera a chave para uma invocação.

        Args:
            target: Instância alvo da invocação
            method: Método invocado
            *params: Argumentos da invocação

        Returns:
            Chave de cache (hashable)
        """
        ...


class CacheErrorHandler(Protocol):
    """Protocol para tratamento de erros lançados pelas caches."""

    def handle_cache_get_error(self, error: Exception, cache: Any, key: Any) -> None:
        """Trata erro de leitura."""
        ...

    def handle_cache_put_error(self, error: Exception, cache: Any, key: Any, value: Any) -> None:
        """Trata erro de escrita."""
        ...

    def handle_cache_evict_error(self, error: Exception, cache: Any, key: Any) -> None:
        """Trata erro de remoção."""
        ...

    def handle_cache_clear_error(self, error: Exception, cache: Any) -> None:
        """Trata erro de limpeza."""
        ...


class CachingConfigurer(Protocol):
    """Protocol para o configurador opcional fornecido pelo usuário.

    Cada accessor retorna o colaborador a usar ou None para manter o
    default do framework. No máximo uma instância pode existir no container.

    Example:
        ```python
        class AppCachingConfigurer(CachingConfigurerSupport):
            def cache_manager(self):
                return RedisCacheManager(url)
        ```
    """

    def cache_manager(self) -> CacheManager | None:
        """Gerenciador de cache a usar, ou None."""
        ...

    def cache_resolver(self) -> CacheResolver | None:
        """Resolver de cache a usar, ou None."""
        ...

    def key_generator(self) -> KeyGenerator | None:
        """Gerador de chaves a usar, ou None."""
        ...

    def error_handler(self) -> CacheErrorHandler | None:
        """Tratador de erros a usar, ou None."""
        ...


class AnnotationMetadata(Protocol):
    """Protocol para os metadados da classe que carrega a diretiva.

    Fornecido pelo mecanismo externo de introspecção.
    """

    @property
    def class_name(self) -> str:
        """Nome qualificado da classe importadora."""
        ...

    def get_annotation_attributes(self, annotation_name: str) -> Mapping[str, Any] | None:
        """Retorna os atributos declarados da diretiva ou None se ausente.

        Args:
            annotation_name: Nome qualificado da diretiva
        """
        ...


class ResolutionHooks(Protocol):
    """Protocol para hooks de observabilidade da resolução."""

    def on_metadata_captured(self, class_name: str, attributes: Mapping[str, Any]) -> None:
        """Chamado após capturar os atributos da diretiva."""
        ...

    def on_configurer_selected(self, class_name: str, configurer: CachingConfigurer | None) -> None:
        """Chamado após selecionar o configurer (None quando não há nenhum)."""
        ...

    def on_resolved(self, class_name: str, configuration: Any) -> None:
        """Chamado quando a resolução termina com sucesso."""
        ...

    def on_resolution_error(self, class_name: str, error: Exception) -> None:
        """Chamado quando qualquer transição da resolução falha."""
        ...
