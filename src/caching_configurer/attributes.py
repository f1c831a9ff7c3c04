"""Atributos imutáveis da diretiva de habilitação do cache."""

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar

from .constants import (
    ENABLE_CACHING_ANNOTATION,
    ERROR_ATTRIBUTE_ENUM,
    ERROR_ATTRIBUTE_MISSING,
    ERROR_ATTRIBUTE_TYPE,
)
from .exceptions import InvalidAttributeError

E = TypeVar("E", bound=Enum)


class EnableAttributes(Mapping[str, Any]):
    """Mapping somente leitura com os atributos declarados na diretiva.

    Guarda uma cópia do mapping recebido, de modo que alterações no
    original não afetam os atributos capturados.

    Attributes:
        annotation_name: Nome qualificado da diretiva de origem
    """

    def __init__(self, attributes: Mapping[str, Any], annotation_name: str = ENABLE_CACHING_ANNOTATION) -> None:
        self._attributes = MappingProxyType(dict(attributes))
        self._annotation_name = annotation_name

    @classmethod
    def from_map(
        cls, attributes: Mapping[str, Any] | None, annotation_name: str = ENABLE_CACHING_ANNOTATION
    ) -> "EnableAttributes | None":
        """Cria a partir de um mapping, propagando None quando ausente."""
        if attributes is None:
            return None
        if isinstance(attributes, EnableAttributes):
            return attributes
        return cls(attributes, annotation_name)

    @property
    def annotation_name(self) -> str:
        """Nome qualificado da diretiva."""
        return self._annotation_name

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"EnableAttributes({dict(self._attributes)!r})"

    def get_string(self, name: str) -> str:
        """Retorna atributo do tipo str."""
        return self._get_required(name, str)

    def get_bool(self, name: str) -> bool:
        """Retorna atributo do tipo bool."""
        return self._get_required(name, bool)

    def get_int(self, name: str) -> int:
        """Retorna atributo do tipo int (bool não é aceito)."""
        value = self._get_required(name, int)
        if isinstance(value, bool):
            raise self._type_error(name, int, value)
        return value

    def get_enum(self, name: str, enum_type: type[E]) -> E:
        """Retorna atributo como membro de enum.

        Aceita o próprio membro ou o seu valor (ex: "proxy" para AdviceMode.PROXY).

        Raises:
            InvalidAttributeError: Se o valor não corresponder a nenhum membro
        """
        value = self._get_required(name, object)
        if isinstance(value, enum_type):
            return value
        try:
            return enum_type(value)
        except ValueError:
            allowed = [member.value for member in enum_type]
            raise InvalidAttributeError(
                ERROR_ATTRIBUTE_ENUM.format(name=name, value=value, allowed=allowed, annotation=self._annotation_name),
                attribute=name,
            ) from None

    def _get_required(self, name: str, expected: type) -> Any:
        if name not in self._attributes:
            raise InvalidAttributeError(
                ERROR_ATTRIBUTE_MISSING.format(name=name, annotation=self._annotation_name),
                attribute=name,
            )
        value = self._attributes[name]
        if not isinstance(value, expected):
            raise self._type_error(name, expected, value)
        return value

    def _type_error(self, name: str, expected: type, value: Any) -> InvalidAttributeError:
        return InvalidAttributeError(
            ERROR_ATTRIBUTE_TYPE.format(
                name=name,
                actual=type(value).__name__,
                expected=expected.__name__,
                annotation=self._annotation_name,
            ),
            attribute=name,
        )
