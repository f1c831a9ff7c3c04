"""Resolução dos colaboradores de cache na inicialização do container.

Recebe os atributos da diretiva de habilitação e os candidatos a
CachingConfigurer fornecidos pelo container, e produz uma
ResolvedConfiguration com as quatro referências de colaboradores.

Uso básico:
    ```python
    resolver = CachingConfigurationResolver()
    configuration = resolver.resolve(import_metadata, container.beans_of(CachingConfigurer))

    key_generator = configuration.key_generator or DefaultKeyGenerator()
    ```
"""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum

from .attributes import EnableAttributes
from .constants import ENABLE_CACHING_ANNOTATION, ERROR_ALREADY_RESOLVED
from .exceptions import AmbiguousConfigurerError, ConfigurationError, MissingDirectiveError
from .observability.hooks import SilentResolutionHooks
from .options import CachingOptions, CachingOptionsConfig
from .protocols import (
    AnnotationMetadata,
    CacheErrorHandler,
    CacheManager,
    CacheResolver,
    CachingConfigurer,
    KeyGenerator,
    ResolutionHooks,
)

logger = logging.getLogger(__name__)


class ResolutionState(Enum):
    """Estados do ciclo de vida de uma resolução."""

    UNINITIALIZED = "uninitialized"
    METADATA_CAPTURED = "metadata_captured"
    CONFIGURER_SELECTED = "configurer_selected"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class ResolvedConfiguration:
    """Colaboradores resolvidos para a camada de cache.

    Campos None significam "usar o default do framework"; a substituição
    é responsabilidade dos consumidores (ver CachingComponents).
    """

    enable_attributes: EnableAttributes | None = None
    cache_manager: CacheManager | None = None
    cache_resolver: CacheResolver | None = None
    key_generator: KeyGenerator | None = None
    error_handler: CacheErrorHandler | None = None

    @property
    def is_customized(self) -> bool:
        """True se algum colaborador foi definido por um configurer."""
        return any(
            collaborator is not None
            for collaborator in (self.cache_manager, self.cache_resolver, self.key_generator, self.error_handler)
        )

    @property
    def options(self) -> CachingOptions:
        """Opções da diretiva (proxy_target_class, mode, order).

        Raises:
            ConfigurationError: Se os atributos ainda não foram capturados
        """
        if self.enable_attributes is None:
            raise ConfigurationError("Directive attributes have not been captured yet")
        return CachingOptionsConfig.resolve(self.enable_attributes)


class CachingConfigurationResolver:
    """Resolve a configuração de cache a partir da diretiva e do configurer.

    Executa uma única vez, de forma síncrona, durante o startup:
    UNINITIALIZED -> METADATA_CAPTURED -> CONFIGURER_SELECTED -> RESOLVED.
    Qualquer erro leva ao estado FAILED e é propagado ao container.

    Attributes:
        annotation_name: Nome qualificado da diretiva procurada
    """

    def __init__(
        self,
        configuration: ResolvedConfiguration | None = None,
        annotation_name: str = ENABLE_CACHING_ANNOTATION,
        hooks: ResolutionHooks | None = None,
    ) -> None:
        """Inicializa o resolver.

        Args:
            configuration: Alvo a popular (cria um vazio se não fornecido)
            annotation_name: Nome qualificado da diretiva de habilitação
            hooks: Hooks de observabilidade (default: silenciosos)
        """
        self._configuration = configuration if configuration is not None else ResolvedConfiguration()
        self._annotation_name = annotation_name
        self._hooks = hooks if hooks is not None else SilentResolutionHooks()
        self._state = ResolutionState.UNINITIALIZED
        self._class_name: str | None = None

    @property
    def annotation_name(self) -> str:
        """Nome qualificado da diretiva."""
        return self._annotation_name

    @property
    def state(self) -> ResolutionState:
        """Estado atual da resolução."""
        return self._state

    @property
    def configuration(self) -> ResolvedConfiguration:
        """Configuração alvo desta resolução."""
        return self._configuration

    def capture_metadata(self, importing_class_metadata: AnnotationMetadata) -> EnableAttributes:
        """Captura os atributos da diretiva na classe importadora.

        Args:
            importing_class_metadata: Metadados da classe que carrega a diretiva

        Returns:
            Atributos imutáveis da diretiva

        Raises:
            MissingDirectiveError: Se a classe não carrega a diretiva
        """
        class_name = importing_class_metadata.class_name
        self._class_name = class_name
        with self._failing_on_error():
            attributes = EnableAttributes.from_map(
                importing_class_metadata.get_annotation_attributes(self._annotation_name),
                self._annotation_name,
            )
            if attributes is None:
                raise MissingDirectiveError(self._annotation_name, class_name)

            self._configuration.enable_attributes = attributes
            self._state = ResolutionState.METADATA_CAPTURED
            logger.debug(
                "Captured %d attribute(s) of [%s] on %s", len(attributes), self._annotation_name, class_name
            )
            self._hooks.on_metadata_captured(class_name, attributes)
        return attributes

    def select_configurer(self, candidates: Iterable[CachingConfigurer] | None) -> CachingConfigurer | None:
        """Seleciona o único configurer, se existir.

        Zero candidatos é válido (mantém os defaults); dois ou mais é
        um erro fatal, sem qualquer desempate.

        Args:
            candidates: Configurers conhecidos pelo container (pode ser vazio)

        Returns:
            O configurer selecionado ou None

        Raises:
            AmbiguousConfigurerError: Se houver mais de um candidato
        """
        with self._failing_on_error():
            configurers = list(candidates) if candidates is not None else []
            if len(configurers) > 1:
                raise AmbiguousConfigurerError(len(configurers), class_name=self._class_name)

            configurer = configurers[0] if configurers else None
            self._state = ResolutionState.CONFIGURER_SELECTED
            if configurer is None:
                logger.debug("No CachingConfigurer found for %s, keeping defaults", self._class_name)
            else:
                logger.debug("Selected CachingConfigurer %s for %s", type(configurer).__name__, self._class_name)
            self._hooks.on_configurer_selected(self._class_name or "", configurer)
        return configurer

    def apply_configurer(
        self, configurer: CachingConfigurer, target: ResolvedConfiguration | None = None
    ) -> None:
        """Copia os quatro colaboradores do configurer para o alvo.

        Os valores são atribuídos como retornados, inclusive None. Exceções
        dos accessors propagam sem tradução e nenhum campo é alterado.
        O estado só avança para RESOLVED a partir de CONFIGURER_SELECTED.

        Args:
            configurer: Configurer selecionado
            target: Configuração a popular (default: a deste resolver)
        """
        target = target if target is not None else self._configuration
        with self._failing_on_error():
            cache_manager = configurer.cache_manager()
            cache_resolver = configurer.cache_resolver()
            key_generator = configurer.key_generator()
            error_handler = configurer.error_handler()

        target.cache_manager = cache_manager
        target.cache_resolver = cache_resolver
        target.key_generator = key_generator
        target.error_handler = error_handler
        if self._state is ResolutionState.CONFIGURER_SELECTED:
            self._state = ResolutionState.RESOLVED
        logger.debug("Applied CachingConfigurer %s to %s", type(configurer).__name__, self._class_name)

    def resolve(
        self,
        importing_class_metadata: AnnotationMetadata,
        candidates: Iterable[CachingConfigurer] | None,
    ) -> ResolvedConfiguration:
        """Executa a resolução completa.

        Args:
            importing_class_metadata: Metadados da classe importadora
            candidates: Configurers conhecidos pelo container

        Returns:
            Configuração resolvida

        Raises:
            ConfigurationError: Se a resolução já foi executada
            MissingDirectiveError: Se a diretiva não estiver presente
            AmbiguousConfigurerError: Se houver mais de um configurer
        """
        if self._state is not ResolutionState.UNINITIALIZED:
            raise ConfigurationError(
                ERROR_ALREADY_RESOLVED.format(class_name=self._class_name),
                class_name=self._class_name,
            )

        self.capture_metadata(importing_class_metadata)
        configurer = self.select_configurer(candidates)
        if configurer is not None:
            self.apply_configurer(configurer)
        with self._failing_on_error():
            self._state = ResolutionState.RESOLVED
            self._hooks.on_resolved(self._class_name or "", self._configuration)
        return self._configuration

    @contextmanager
    def _failing_on_error(self) -> Iterator[None]:
        """Marca a resolução como FAILED e notifica os hooks antes de propagar."""
        try:
            yield
        except Exception as e:
            self._state = ResolutionState.FAILED
            self._hooks.on_resolution_error(self._class_name or "", e)
            raise
