"""Exceções de configuração para caching-configurer.

Todas representam erros fatais de inicialização: o container deve abortar
o startup em vez de continuar com uma configuração parcial.
"""


class ConfigurationError(Exception):
    """Erro base para falhas de configuração do cache."""

    def __init__(self, message: str, class_name: str | None = None) -> None:
        self.class_name = class_name
        super().__init__(message)


class MissingDirectiveError(ConfigurationError):
    """A classe importadora não possui a diretiva de habilitação do cache."""

    def __init__(self, annotation_name: str, class_name: str) -> None:
        self.annotation_name = annotation_name
        super().__init__(
            f"@{annotation_name.rsplit('.', 1)[-1]} is not present on importing class {class_name}",
            class_name=class_name,
        )


class AmbiguousConfigurerError(ConfigurationError):
    """Mais de um CachingConfigurer foi encontrado."""

    def __init__(self, count: int, class_name: str | None = None) -> None:
        self.count = count
        super().__init__(
            f"{count} implementations of CachingConfigurer were found when only 1 was expected. "
            "Refactor the configuration such that CachingConfigurer is "
            "implemented only once or not at all.",
            class_name=class_name,
        )


class InvalidAttributeError(ConfigurationError):
    """Atributo da diretiva ausente ou com tipo/valor inválido."""

    def __init__(self, message: str, attribute: str, class_name: str | None = None) -> None:
        self.attribute = attribute
        super().__init__(message, class_name=class_name)
